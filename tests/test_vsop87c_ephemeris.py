import json
import math

import numpy as np
import pytest

from time_scales import millennia_since_j2000
from vsop87c_converter import CoefficientSet, parse_coefficients
from vsop87c_ephemeris import (Position, VSOP87CEphemeris, evaluate_series,
                               get_position, position_at)

EMPTY = np.zeros((0, 3))

@pytest.mark.parametrize('t', [-2.5, -0.1, 0.0, 0.01537, 1.0, 30.0])
@pytest.mark.parametrize('power', range(6))
def test_empty_series_is_zero(t, power):
    assert evaluate_series(EMPTY, t, power) == 0.0

def test_power_zero_at_t_zero():
    coeffs = np.array([[2.0, 0.0, 5.0]])
    assert evaluate_series(coeffs, 0.0, 0) == 2.0
    assert evaluate_series(coeffs, 0.0, 1) == 0.0

def test_series_value():
    coeffs = np.array([[1.5, 0.3, 2.0], [-0.25, 1.0, 100.0]])
    t = 0.02
    expected = (1.5*math.cos(0.3 + 2.0*t) - 0.25*math.cos(1.0 + 100.0*t)) * t**3
    assert evaluate_series(coeffs, t, 3) == pytest.approx(expected, rel=1e-14)

def test_axes_and_powers_are_combined():
    coefficient_set = CoefficientSet({
        'x0': [(1.0, 0.0, 0.0)],
        'x1': [(2.0, 0.0, 0.0)],
        'y0': [(1.0, math.pi/2, 0.0)],
        'y5': [(3.0, 0.0, 0.0)],
        'z2': [(1.0, 0.0, math.pi)],
    })
    t = 0.5
    p = position_at(coefficient_set, t)
    assert p.x == pytest.approx(1.0 + 2.0*t)
    assert p.y == pytest.approx(3.0*t**5, abs=1e-15)
    assert p.z == pytest.approx(math.cos(math.pi*t)*t**2, abs=1e-15)

def test_get_position_uses_tt_millennia():
    coefficient_set = CoefficientSet({'x1': [(1.0, 0.0, 0.0)]})
    instant = '2015-06-27T02:00:00Z'
    assert get_position(coefficient_set, instant).x == pytest.approx(millennia_since_j2000(instant), rel=1e-15)

def test_get_position_is_deterministic(make_source):
    sections = [[(0.1*(k+1), 0.37*j, 6283.07585 + 17.0*j) for j in range(5)] for k in range(18)]
    coefficient_set = parse_coefficients(make_source(sections))
    instant = '1987-04-10T19:21:00Z'
    p1 = get_position(coefficient_set, instant)
    p2 = get_position(coefficient_set, instant)
    assert (p1.x, p1.y, p1.z) == (p2.x, p2.y, p2.z)
    assert p1 == p2

def test_position_is_frozen():
    p = Position(3.0, 4.0, 12.0)
    assert p.distance == 13.0
    np.testing.assert_array_equal(p.as_array(), [3.0, 4.0, 12.0])
    with pytest.raises(AttributeError):
        p.x = 1.0

def test_ephemeris_sources(tmp_path, make_source):
    sections = [[(1.0 + k, 0.0, 0.0)] for k in range(17)]
    text = make_source(sections)
    raw_path = tmp_path / 'VSOP87C.ear'
    raw_path.write_text(text)
    coefficient_set = parse_coefficients(text)
    json_path = tmp_path / 'ear.json'
    json_path.write_text(json.dumps(coefficient_set.to_json_object()))

    ephemerides = [
        VSOP87CEphemeris(coefficient_set),
        VSOP87CEphemeris(str(raw_path)),
        VSOP87CEphemeris(str(json_path)),
        VSOP87CEphemeris(raw_path),
        VSOP87CEphemeris(json_path),
        VSOP87CEphemeris(coefficient_set.to_json_object()),
    ]
    t = 0.1
    expected = sum((1.0 + k) * t**k for k in range(6))
    for vsop87c in ephemerides:
        p = vsop87c.get_position_at(t)
        assert p.x == pytest.approx(expected)
        # z5 is the zero term added for the 17 section file
        assert p.z == pytest.approx(sum((13.0 + k) * t**k for k in range(5)))
    assert ephemerides[0].get_position(0) == ephemerides[1].get_position(0)
