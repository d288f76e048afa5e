# Miscellaneous helper functions

import contextlib
import functools
import json
import time

import numpy as np
from jplephem.spk import SPK

DEG = np.pi / 180.0
ARCSEC = np.pi / 180.0 / 3600
AU = 149597870.7    # AU in km (IAU 2012)

# Mean obliquity of the ecliptic at J2000.0, 84381.448"
OBLIQUITY_J2000 = 84381.448 * ARCSEC

def format_time(t: float) -> str:
    if t >= 3600.0:
        hours = int(t / 3600.0)
        minutes = int((t % 3600.0) / 60.0)
        return f'{hours}h {minutes}min'
    elif t >= 60.0:
        minutes = int(t / 60.0)
        seconds = int(t % 60.0)
        return f'{minutes}min {seconds}s'
    return f'{t:.2g}s'

def time_it(f):
    """
    Writes elapsed time for function execution.
    """
    @functools.wraps(f)
    def wrapper(*pos_args, **keyw_args):
        time0 = time.perf_counter()
        return_value = f(*pos_args, **keyw_args)
        print(f'Function {f.__name__} took {format_time(time.perf_counter()-time0)}.')
        return return_value
    return wrapper

def cartesian_from_spherical(lon, lat, r):
    """
    Returns rectangular coordinates (x, y, z) for longitude and latitude in
    radians and radius r. Works elementwise on arrays.
    """
    q = r*np.cos(lat)
    return np.array([q*np.cos(lon), q*np.sin(lon), r*np.sin(lat)])

def angle_between(u, v):
    # Numerically stable for small angles, unlike arccos of the dot product
    u = np.asarray(u, dtype=float)
    v = np.asarray(v, dtype=float)
    return np.arctan2(np.linalg.norm(np.cross(u, v)), np.dot(u, v))

def load_json(file_name: str):
    with open(file_name, 'r') as f:
        data = json.loads(f.read())
    return data

def stats(v: np.ndarray):
    if v.size == 0:
        raise ValueError('Input array must not be empty')
    return {
        'n': v.size,
        'mean': v.mean(),
        'std': v.std(),
        'min': v.min(),
        'max': v.max()
    }

def dms_string(x: float, arcsec_digits=0) -> str:
    """
    Formats angle x (radians) as degrees, arcminutes and arcseconds, leaving out
    leading zero parts: 1.5 arcsec gives '2"' with default digits.
    """
    if x < 0.0:
        return f'-{dms_string(-x, arcsec_digits)}'
    total_degrees = x * 180.0 / np.pi
    degrees = int(total_degrees)
    remainder = (total_degrees - degrees) * 60
    arcminutes = int(remainder)
    arcseconds = (remainder - arcminutes) * 60
    deg_str = f'{degrees}°' if degrees != 0 else ''
    arcmin_str = f"{arcminutes}'" if (arcminutes != 0 or degrees != 0) else ''
    arcsec_str = f'{arcseconds:.{arcsec_digits}f}\"'
    return ''.join([deg_str, arcmin_str, arcsec_str])

def rotation_matrix(k, theta):
    # Always CHECK the sign with rotations! Source of sign differences:
    # https://en.wikipedia.org/wiki/Active_and_passive_transformation
    c, s = np.cos(theta), np.sin(theta)
    rot = np.zeros((3, 3))
    k1, k2 = (k+1)%3, (k+2)%3
    rot[k,k] = 1
    rot[k1,k1] = c
    rot[k1,k2] = -s
    rot[k2,k1] = s
    rot[k2,k2] = c
    return rot

# Mean equator and equinox of J2000.0 to ecliptic J2000.0
ROT_EQU_ECL = rotation_matrix(0, -OBLIQUITY_J2000)

def jpl_segment_getter(kernel):
    """
    Returns function that chooses correct segment in the bsp file.
    Needed for de441.bsp where one (center, target) pair has several segments,
    which the "kernel[center,target]" lookup of jplephem does not support.
    """
    segment_index = {}
    for segment in kernel.segments:
        segment_index.setdefault((segment.center, segment.target), []).append(segment)

    def get_segment(center, target, jd):
        for segment in segment_index[center, target]:
            if segment.start_jd <= jd and jd <= segment.end_jd:
                return segment
        raise ValueError(f'No segment for ({center},{target}) at JD {jd}.')
    return get_segment

def jpl_get_position(segment_getter, route, jd):
    """
    Position at the end of route (list of NAIF ids) relative to its start,
    ICRF, units km. Time jd is a TDB Julian day.
    """
    pos = np.zeros(3)
    for k in range(len(route)-1):
        tr = (route[k], route[k+1])
        segment = segment_getter(min(tr), max(tr), jd)
        pos += np.sign(tr[1]-tr[0]) * segment.compute(jd)
    return pos

@contextlib.contextmanager
def jplephem_position(jpl_ephemeris_file_path):
    """
    Convenience context manager that on enter provides a function
    fn(route, jd) for computing positions from the kernel.
    """
    with SPK.open(jpl_ephemeris_file_path) as kernel:
        segment_getter = jpl_segment_getter(kernel)
        fn = lambda route, jd: jpl_get_position(segment_getter, route, jd)
        yield fn
