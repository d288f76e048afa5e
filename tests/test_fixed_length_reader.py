import pytest

from tools.fixed_length_reader import FixedLengthReader

def test_read_columns():
    reader = FixedLengthReader([(0, 3, 'code', int), (3, 10, 'name', str), (10, 20, 'value', float)])
    line = '042JUPITER 5.2036   '
    assert reader.read(line) == [42, 'JUPITER', 5.2036]

def test_fortran_double_exponent():
    reader = FixedLengthReader([(0, 12, 'v', float)])
    assert reader.read('  0.15D+02  ') == [15.0]
    assert reader.read('  2.5d-01   ') == [0.25]

def test_open_ended_column():
    reader = FixedLengthReader([(4, None, 'rest', str)])
    assert reader.read('abc defgh') == ['defgh']

def test_unparsable_field_names_column():
    reader = FixedLengthReader([(0, 4, 'amplitude', float)])
    with pytest.raises(ValueError, match='amplitude'):
        reader.read('abcd')

@pytest.mark.parametrize('columns', [
    [(5, 5, 'empty', float)],
    [(-1, 3, 'negative', float)],
    [(0, 3, 'bad_type', list)],
])
def test_invalid_columns(columns):
    with pytest.raises(ValueError):
        FixedLengthReader(columns)
