"""
Computes heliocentric planet positions with VSOP87C series: ecliptic rectangular
coordinates for the equinox of date, in AU.
"""
import os
from dataclasses import dataclass

import numpy as np

import tools.misc as misc
from time_scales import millennia_since_j2000
from vsop87c_converter import AXES, MAX_POWER, CoefficientSet, load_coefficients

@dataclass(frozen=True)
class Position:
    """
    Heliocentric rectangular coordinates in AU.
    """
    x: float
    y: float
    z: float

    @property
    def distance(self) -> float:
        return float(np.sqrt(self.x*self.x + self.y*self.y + self.z*self.z))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

def evaluate_series(coeffs: np.ndarray, t: float, power: int) -> float:
    """
    Returns t^power * sum(a * cos(b + c*t)) for rows (a, b, c) of coeffs.
    """
    if len(coeffs) == 0:
        return 0.0
    s = np.sum(coeffs[:,0] * np.cos(coeffs[:,1] + coeffs[:,2]*t))
    # Python float power, so 0.0**0 == 1.0
    return float(s) * float(t)**power

def position_at(coefficient_set: CoefficientSet, t: float) -> Position:
    """
    Position for time t in Julian millennia since J2000.0 (TT).
    """
    pos = {}
    for axis in AXES:
        pos[axis] = sum(evaluate_series(coefficient_set[axis, power], t, power) for power in range(MAX_POWER+1))
    return Position(**pos)

def get_position(coefficient_set: CoefficientSet, instant) -> Position:
    """
    Position at the given instant, see time_scales.unix_milliseconds for the
    accepted forms of instant.
    """
    return position_at(coefficient_set, millennia_since_j2000(instant))

class VSOP87CEphemeris:
    """
    Computes the position of one body w.r.t. the Sun using its VSOP87C series.
    """
    def __init__(self, source):
        """
        Here source can be a CoefficientSet, a path to a VSOP87C file or to a
        json file written by vsop87c_converter, or the json object itself.
        """
        if isinstance(source, (str, os.PathLike)):
            source = os.fspath(source)
            if source.lower().endswith('.json'):
                source = misc.load_json(source)
            else:
                source = load_coefficients(source)
        if not isinstance(source, CoefficientSet):
            source = CoefficientSet.from_json_object(source)
        self.coefficient_set = source

    def get_position_at(self, t: float) -> Position:
        return position_at(self.coefficient_set, t)

    def get_position(self, instant) -> Position:
        return get_position(self.coefficient_set, instant)
