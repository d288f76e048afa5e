"""
Builders for synthetic VSOP87C text. Real files are not shipped with the tests.
"""
import pytest

HEADER = ' VSOP87 VERSION C3    MERCURY   VARIABLE 1 (XYZ)       *T**{power}      {count:>5} TERMS    HELIOCENTRIC DYNAMICAL ECLIPTIC AND EQUINOX OF THE DATE'

def header_line(power=0, count=1):
    line = HEADER.format(power=power, count=count)
    return line[:132].ljust(132)

def term_line(a, b, c, prefix=' 3110    1  0  0  0  0  0  0  0  0  0  0  0  0 '):
    # 79 characters of indices and sin/cos coefficients, then A, B, C and one trailing space
    line = prefix.ljust(79) + f'{a:18.11f}' + f'{b:14.11f}' + f'{c:20.11f}' + ' '
    assert len(line) == 132
    return line

def source_text(sections):
    """
    Text for the given list of sections, each a list of (a, b, c) terms.
    """
    lines = []
    for k, terms in enumerate(sections):
        lines.append(header_line(k % 6, len(terms)))
        lines.extend(term_line(*term) for term in terms)
    return '\n'.join(lines) + '\n'

@pytest.fixture
def make_source():
    return source_text

@pytest.fixture
def make_term_line():
    return term_line

@pytest.fixture
def make_header_line():
    return header_line
