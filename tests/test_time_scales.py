import datetime

import numpy as np
import pytest

from ephemeris_errors import InvalidInput
from time_scales import (J2000_UNIX_MS, millennia_since_j2000,
                         unix_milliseconds)

UTC = datetime.timezone.utc

def test_j2000_instant_is_zero():
    assert millennia_since_j2000(J2000_UNIX_MS) == pytest.approx(0.0, abs=1e-8)
    j2000 = datetime.datetime(2000, 1, 1, 11, 58, 55, 816000, tzinfo=UTC)
    assert millennia_since_j2000(j2000) == pytest.approx(0.0, abs=1e-8)

def test_fixed_tt_offset_is_applied():
    # Only the 51.184 s offset remains at the J2000.0 instant
    assert millennia_since_j2000(J2000_UNIX_MS) == pytest.approx(51184 / 86400000.0 / 365250.0, rel=1e-12)

def test_one_julian_millennium():
    ms = J2000_UNIX_MS - 51184 + 365250 * 86400000
    assert millennia_since_j2000(ms) == pytest.approx(1.0, rel=1e-12)

def test_equivalent_instant_forms():
    expected = millennia_since_j2000(1435370400000)
    assert expected == pytest.approx(0.0154841469, abs=1e-9)
    forms = [
        datetime.datetime(2015, 6, 27, 2, 0, tzinfo=UTC),
        datetime.datetime(2015, 6, 27, 4, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=2))),
        '2015-06-27T02:00:00Z',
        '2015-06-27T05:00:00+03:00',
        np.datetime64('2015-06-27T02:00:00'),
        1435370400000.0,
    ]
    for instant in forms:
        assert millennia_since_j2000(instant) == pytest.approx(expected, abs=1e-15)

@pytest.mark.parametrize('instant', [
    datetime.datetime(2015, 6, 27, 2, 0),
    '2015-06-27T02:00:00',
    'yesterday',
    np.datetime64('NaT'),
    float('nan'),
    float('inf'),
    None,
    True,
    [2015, 6, 27],
])
def test_unresolvable_instants(instant):
    with pytest.raises(InvalidInput):
        millennia_since_j2000(instant)

def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        unix_milliseconds('not a date')
