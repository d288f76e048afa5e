"""
Heliocentric position of Pluto from the periodic terms of Meeus, Astronomical
Algorithms, chapter 37 (table 37.A). VSOP87 does not cover Pluto.

Accurate to within 0.07" in longitude, 0.02" in latitude and 0.000006 AU in radius
between 1885 and 2099. Outside that period the result is computed anyway but
the accuracy does not hold.
"""
import numpy as np

import tools.misc as misc
from time_scales import millennia_since_j2000
from vsop87c_ephemeris import Position

# Each row i: argument = ARGUMENT[i] . (J, S, P), and (sin, cos) coefficients
# of that argument for longitude and latitude (1e-6 deg) and radius (1e-7 AU).
ARGUMENT = (
    (0, 0, 1),
    (0, 0, 2),
    (0, 0, 3),
    (0, 0, 4),
    (0, 0, 5),
    (0, 0, 6),
    (0, 1, -1),
    (0, 1, 0),
    (0, 1, 1),
    (0, 1, 2),
    (0, 1, 3),
    (0, 2, -2),
    (0, 2, -1),
    (0, 2, 0),
    (1, -1, 0),
    (1, -1, 1),
    (1, 0, -3),
    (1, 0, -2),
    (1, 0, -1),
    (1, 0, 0),
    (1, 0, 1),
    (1, 0, 2),
    (1, 0, 3),
    (1, 0, 4),
    (1, 1, -3),
    (1, 1, -2),
    (1, 1, -1),
    (1, 1, 0),
    (1, 1, 1),
    (1, 1, 3),
    (2, 0, -6),
    (2, 0, -5),
    (2, 0, -4),
    (2, 0, -3),
    (2, 0, -2),
    (2, 0, -1),
    (2, 0, 0),
    (2, 0, 1),
    (2, 0, 2),
    (2, 0, 3),
    (3, 0, -2),
    (3, 0, -1),
    (3, 0, 0),
)

LONGITUDE = (
    (-19799805, 19850055),
    (897144, -4954829),
    (611149, 1211027),
    (-341243, -189585),
    (129287, -34992),
    (-38164, 30893),
    (20442, -9987),
    (-4063, -5071),
    (-6016, -3336),
    (-3956, 3039),
    (-667, 3572),
    (1276, 501),
    (1152, -917),
    (630, -1277),
    (2571, -459),
    (899, -1449),
    (-1016, 1043),
    (-2343, -1012),
    (7042, 788),
    (1199, -338),
    (418, -67),
    (120, -274),
    (-60, -159),
    (-82, -29),
    (-36, -20),
    (-40, 7),
    (-14, 22),
    (4, 13),
    (5, 2),
    (-1, 0),
    (2, 0),
    (-4, 5),
    (4, -7),
    (14, 24),
    (-49, -34),
    (163, -48),
    (9, 24),
    (-4, 1),
    (-3, 1),
    (1, 3),
    (-3, -1),
    (5, -3),
    (0, 0),
)

LATITUDE = (
    (-5452852, -14974862),
    (3527812, 1672790),
    (-1050748, 327647),
    (178690, -292153),
    (18650, 100340),
    (-30697, -25823),
    (4878, 11248),
    (226, -64),
    (2030, -836),
    (69, -604),
    (-247, -567),
    (-57, 1),
    (-122, 175),
    (-49, -164),
    (-197, 199),
    (-25, 217),
    (589, -248),
    (-269, 711),
    (185, 193),
    (315, 807),
    (-130, -43),
    (5, 3),
    (2, 17),
    (2, 5),
    (2, 3),
    (3, 1),
    (2, -1),
    (1, -1),
    (0, -1),
    (0, 0),
    (0, -2),
    (2, 2),
    (-7, 0),
    (10, -8),
    (-3, 20),
    (6, 5),
    (14, 17),
    (-2, 0),
    (0, 0),
    (0, 0),
    (0, 1),
    (0, 0),
    (1, 0),
)

RADIUS = (
    (66865439, 68951812),
    (-11827535, -332538),
    (1593179, -1438890),
    (-18444, 483220),
    (-65977, -85431),
    (31174, -6032),
    (-5794, 22161),
    (4601, 4032),
    (-1729, 234),
    (-415, 702),
    (239, 723),
    (67, -67),
    (1034, -451),
    (-129, 504),
    (480, -231),
    (2, -441),
    (-3359, 265),
    (7856, -7832),
    (36, 45763),
    (8663, 8547),
    (-809, -769),
    (263, -144),
    (-126, 32),
    (-35, -16),
    (-19, -4),
    (-15, 8),
    (-4, 12),
    (5, 6),
    (3, 1),
    (6, -2),
    (2, 2),
    (-2, -2),
    (14, 13),
    (-63, 13),
    (136, -236),
    (273, 1065),
    (251, 149),
    (-25, -9),
    (9, -2),
    (-8, 7),
    (2, -10),
    (19, 35),
    (10, 2),
)

if not len(ARGUMENT) == len(LONGITUDE) == len(LATITUDE) == len(RADIUS) == 43:
    raise ValueError('Pluto term tables must have 43 matching rows')

# Mean longitudes of Jupiter, Saturn and Pluto (deg), constant and rate per century
MEAN_LONGITUDES = (
    (34.35, 3034.9057),
    (50.08, 1222.1138),
    (238.96, 144.9600),
)

_ARGUMENT = np.array(ARGUMENT, dtype=float)
_COEFFS = np.array([LONGITUDE, LATITUDE, RADIUS], dtype=float)     # shape (3, 43, 2)

def periodic_sums(t: float) -> np.ndarray:
    """
    Returns the sums of the periodic terms for longitude, latitude and radius
    at t Julian centuries since J2000.0, in table units.
    """
    jsp = np.array([c + rate*t for c, rate in MEAN_LONGITUDES])
    a = (_ARGUMENT @ jsp) * misc.DEG
    sin_a, cos_a = np.sin(a), np.cos(a)
    return _COEFFS[:,:,0] @ sin_a + _COEFFS[:,:,1] @ cos_a

def pluto_spherical_coordinates(t: float):
    """
    Heliocentric ecliptic longitude and latitude (rad) and radius (AU) for the
    series time argument t. The table rates are per Julian century, so t in
    Julian centuries since J2000.0 gives the positions of Meeus (example 37.a).
    """
    sum_longitude, sum_latitude, sum_radius = periodic_sums(t)
    lon = (238.958116 + 144.96*t + sum_longitude*1.0e-6) * misc.DEG
    lat = (-3.908239 + sum_latitude*1.0e-6) * misc.DEG
    r = 40.7241346 + sum_radius*1.0e-7
    return float(lon), float(lat), float(r)

def get_pluto_position_at(t: float) -> Position:
    x, y, z = misc.cartesian_from_spherical(*pluto_spherical_coordinates(t))
    return Position(float(x), float(y), float(z))

def get_pluto_position(instant) -> Position:
    """
    Heliocentric rectangular coordinates of Pluto in AU at the given instant,
    with the series evaluated at Julian millennia since J2000.0 (TT), the same
    time argument as the VSOP87C series.
    NOTE For the Meeus accuracy use get_pluto_position_at() with Julian centuries.
    """
    return get_pluto_position_at(millennia_since_j2000(instant))
