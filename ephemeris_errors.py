"""
Error kinds raised by the ephemeris code. Both are ValueErrors so callers that
already guard numeric input with `except ValueError` keep working.
"""

class InvalidInput(ValueError):
    """
    The given instant cannot be resolved to an absolute point in time.
    """

class MalformedInput(ValueError):
    """
    A coefficient source is not a usable VSOP87C series file (wrong number of
    sections, a term outside any section, unparsable columns).
    """
