"""
Checks VSOP87CEphemeris against reference output from vsop87.chk and computes
errors of the Pluto series against JPL DE ephemeris.
"""
import os

import numpy as np

import tools.misc as misc
from pluto_ephemeris import pluto_spherical_coordinates
from tools.fixed_length_reader import FixedLengthReader
from vsop87c_converter import VSOP87C_NAME_INDEXING
from vsop87c_ephemeris import VSOP87CEphemeris

VSOP87_CHK_PATH = R'd:/resources/astro/vsop87/vsop87.chk'
VSOP87C_RAW_JSON_PATH = R'./json/vsop87c_raw.json'
JPL_DE_EPHEMERIS_PATH = R'd:/resources/astro/de/de441.bsp'

# Sun -> Pluto system barycenter
JPL_DE_PLUTO_ROUTE = [10, 0, 9]
PLUTO_VALID_YEARS = (1885.0, 2099.0)

CHK_HEADER_READER = FixedLengthReader([(1, 8, 'version', str), (10, 22, 'body', str), (24, 35, 'jd', float)])
CHK_VECTOR_READER = FixedLengthReader([(3, 17, 'x', float), (30, 44, 'y', float), (57, 71, 'z', float)])

def load_chk_tests(file_path=VSOP87_CHK_PATH, version='VSOP87C'):
    """
    Loads expected series output values from vsop87.chk for one VSOP87 version.
    Each header line is followed by the position line.
    """
    with open(file_path, 'r') as f:
        lines = f.readlines()

    tests = []
    for k, line in enumerate(lines):
        if line[1:8] != version:
            continue
        _, body_name, jd = CHK_HEADER_READER.read(line)
        if body_name not in VSOP87C_NAME_INDEXING:
            continue
        p = CHK_VECTOR_READER.read(lines[k+1])
        tests.append({ 'body': body_name, 'jd': jd, 'p': p })
    return tests

def run_vsop87c_checks(ephemerides, tests):
    """
    Runs checks from vsop87.chk. Here ephemerides maps body name to VSOP87CEphemeris.
    Returns relative position errors.
    """
    errors = []
    for test in tests:
        vsop87c = ephemerides.get(test['body'])
        if vsop87c is None:
            continue
        t = (test['jd'] - 2451545.0) / 365250.0
        correct_pos = np.array(test['p'])
        pos = vsop87c.get_position_at(t).as_array()
        errors.append(np.linalg.norm(pos-correct_pos) / np.linalg.norm(correct_pos))
    errors = np.array(errors)
    print('Code port error in pos:', misc.stats(errors))
    return errors

def pluto_errors_against_jpl_de(jpl_position, years):
    """
    Compares the Pluto series to positions given by jpl_position(route, jd)
    (ICRF, km). Returns angular errors (rad) and radius errors (AU) for each year.
    """
    angle_errors = []
    radius_errors = []
    for year in years:
        t = (year - 2000.0) / 100.0
        jd = 2451545.0 + t*36525.0
        p_ref = misc.ROT_EQU_ECL @ jpl_position(JPL_DE_PLUTO_ROUTE, jd) / misc.AU
        p = misc.cartesian_from_spherical(*pluto_spherical_coordinates(t))
        angle_errors.append(misc.angle_between(p, p_ref))
        radius_errors.append(abs(np.linalg.norm(p) - np.linalg.norm(p_ref)))
    return np.array(angle_errors), np.array(radius_errors)

def load_ephemerides(json_path=VSOP87C_RAW_JSON_PATH):
    bodies = misc.load_json(json_path)['bodies']
    return {body_name: VSOP87CEphemeris(obj) for body_name, obj in bodies.items()}

def run_tests(test_num):
    if os.path.exists(VSOP87_CHK_PATH) and os.path.exists(VSOP87C_RAW_JSON_PATH):
        print('\n', '-'*20, 'VSOP87C: CODE PORT TESTS AGAINST vsop87.chk', '-'*20)
        run_vsop87c_checks(load_ephemerides(), load_chk_tests())
    else:
        print(f'Skipping vsop87.chk tests: {VSOP87_CHK_PATH} or {VSOP87C_RAW_JSON_PATH} not found.')

    with misc.jplephem_position(JPL_DE_EPHEMERIS_PATH) as jpl_position:
        print('\n', '-'*20, 'PLUTO SERIES ERROR AGAINST DE441', '-'*20)
        years = np.linspace(*PLUTO_VALID_YEARS, test_num)
        angle_errors, radius_errors = pluto_errors_against_jpl_de(jpl_position, years)
        angle_stats = misc.stats(angle_errors)
        print(f'{"MEAN_ANGLE_ERR":>15}{"MAX_ANGLE_ERR":>15}{"MAX_RADIUS_ERR":>15}')
        print(f'{misc.dms_string(angle_stats["mean"], 3):>15}{misc.dms_string(angle_stats["max"], 3):>15}'
              f'{radius_errors.max():>15.1e}')

if __name__ == '__main__':
    run_tests(1000)
