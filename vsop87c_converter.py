"""
Reads coefficients in VSOP87C files (heliocentric ecliptic rectangular coordinates,
equinox of date) into CoefficientSet objects, and converts them to and from json.

Data files: ftp://cdsarc.u-strasbg.fr/pub/cats/VI%2F81/
Each file has 18 sections x0..x5, y0..y5, z0..z5 (coordinate, power of t).
Some files leave out the last one (z5), which is then taken to be zero.
"""
import json
import os
import types
from dataclasses import dataclass

import numpy as np

from ephemeris_errors import MalformedInput
from tools.fixed_length_reader import FixedLengthReader

INPUT_DIRECTORY = 'd:/resources/astro/vsop87'
OUTPUT_RAW_JSON_PATH = './json/vsop87c_raw.json'

VSOP87C_NAME_INDEXING = {
    'MERCURY': (1, 'VSOP87C.mer'),
    'VENUS': (2, 'VSOP87C.ven'),
    'EARTH': (3, 'VSOP87C.ear'),
    'MARS': (4, 'VSOP87C.mar'),
    'JUPITER': (5, 'VSOP87C.jup'),
    'SATURN': (6, 'VSOP87C.sat'),
    'URANUS': (7, 'VSOP87C.ura'),
    'NEPTUNE': (8, 'VSOP87C.nep'),
}

AXES = ('x', 'y', 'z')
MAX_POWER = 5
SERIES_KEYS = tuple(f'{axis}{power}' for axis in AXES for power in range(MAX_POWER+1))

LINE_LENGTH = 132
SECTION_MARKER = ' VSOP87 VERSION C3'

# Only the last three values of a term line are needed for positions.
TERM_READER = FixedLengthReader([
    (79, 97, 'amplitude', float),
    (97, 111, 'phase', float),
    (111, 131, 'frequency', float),
])

def _frozen_terms(terms) -> np.ndarray:
    coeffs = np.array(terms, dtype=float).reshape(-1, 3)
    coeffs.flags.writeable = False
    return coeffs

@dataclass(frozen=True, eq=False, repr=False)
class CoefficientSet:
    """
    The 18 series of one body. Each series is a read-only array of shape (n, 3)
    with rows (amplitude, phase, frequency) in file order.
    """
    series: types.MappingProxyType

    def __init__(self, series):
        unknown = set(series) - set(SERIES_KEYS)
        if unknown:
            raise MalformedInput(f'Unknown series keys: {sorted(unknown)}')
        frozen = {key: _frozen_terms(series.get(key, [])) for key in SERIES_KEYS}
        object.__setattr__(self, 'series', types.MappingProxyType(frozen))

    def __getitem__(self, key):
        if isinstance(key, tuple):
            axis, power = key
            key = f'{axis}{power}'
        return self.series[key]

    def __len__(self):
        return len(self.series)

    def term_count(self) -> int:
        return sum(len(coeffs) for coeffs in self.series.values())

    def to_json_object(self):
        # Coefficients are flattened [a, b, c, a, b, c, ...] to keep the file small
        return {'series': {key: coeffs.ravel().tolist() for key, coeffs in self.series.items()}}

    @classmethod
    def from_json_object(cls, obj):
        try:
            return cls({key: np.array(values, dtype=float).reshape(-1, 3) for key, values in obj['series'].items()})
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise MalformedInput(f'Invalid coefficient json object: {e}') from e

def parse_coefficients(raw_text: str) -> CoefficientSet:
    """
    Parses the text of one VSOP87C file. Lines that are not exactly 132 characters
    long are ignored. Raises MalformedInput unless 17 or 18 sections are found.
    """
    sections = []
    for line_number, line in enumerate(raw_text.split('\n'), start=1):
        if line.endswith('\r'):
            line = line[:-1]
        if len(line) != LINE_LENGTH:
            continue
        if line.startswith(SECTION_MARKER):
            if len(sections) == len(SERIES_KEYS):
                raise MalformedInput(f'Line {line_number}: more than {len(SERIES_KEYS)} sections.')
            sections.append([])
            continue
        if not sections:
            raise MalformedInput(f'Line {line_number}: coefficient line before the first section header.')
        try:
            sections[-1].append(TERM_READER.read(line))
        except ValueError as e:
            raise MalformedInput(f'Line {line_number}: {e}') from e

    if len(sections) == len(SERIES_KEYS) - 1:
        # z5 left out of the file
        sections.append([(0.0, 0.0, 0.0)])
    if len(sections) != len(SERIES_KEYS):
        raise MalformedInput(f'Invalid VSOP87C source: found {len(sections)} sections, expected 17 or 18.')

    return CoefficientSet(dict(zip(SERIES_KEYS, sections)))

def load_coefficients(file_path) -> CoefficientSet:
    with open(file_path, 'r', encoding='ascii') as f:
        return parse_coefficients(f.read())

def load_raw_data(directory=INPUT_DIRECTORY):
    """
    Reads every VSOP87C body file found in directory. Unusable files are
    reported and skipped.
    """
    bodies = {}
    term_count = {}
    for body_name, (_, file_name) in VSOP87C_NAME_INDEXING.items():
        file_path = os.path.join(directory, file_name)
        if not os.path.exists(file_path):
            print(f'Skipping {body_name}: {file_path} not found.')
            continue
        try:
            coefficient_set = load_coefficients(file_path)
        except MalformedInput as e:
            print(f'Skipping {body_name}: {e}')
            continue
        bodies[body_name] = coefficient_set.to_json_object()
        term_count[body_name] = coefficient_set.term_count()

    print(f'total # of terms = {sum(term_count.values())},\n{term_count = }')
    return {
        '_comment': 'VSOP87C raw data with coefficients a, b, c',
        'bodies': bodies
    }

def write_raw_json(obj_raw, file_path=OUTPUT_RAW_JSON_PATH):
    # Writes the raw data into a json file
    with open(file_path, 'w') as f:
        json_string = json.dumps(obj_raw, indent=None, separators=(',', ':'))
        f.write(json_string)
    print(f'Wrote raw json to {file_path}.')

if __name__ == '__main__':
    print('-'*20, 'Loading files, writing raw json', '-'*20)
    obj_raw = load_raw_data()
    write_raw_json(obj_raw)
