"""
Conversion of calendar instants to the time argument used by the series:
Julian millennia since J2000.0 in Terrestrial Time.

NOTE TT is obtained from UTC with a fixed offset (19 s UTC->TAI plus 32.184 s
TAI->TT), not from a leap second table, so the result drifts for instants far
from 2000.
"""
import datetime
import math

import numpy as np

from ephemeris_errors import InvalidInput

# 2000-01-01 11:58:55.816 UTC in milliseconds since the Unix epoch
J2000_UNIX_MS = 946727935816
TT_MINUS_UTC_MS = 19000 + 32184
MS_PER_DAY = 86400000.0
DAYS_PER_MILLENNIUM = 365250.0

UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

def unix_milliseconds(instant) -> float:
    """
    Returns milliseconds since the Unix epoch for an aware datetime, an ISO 8601
    string with offset, a numpy.datetime64 or a plain number of milliseconds.
    """
    if isinstance(instant, str):
        try:
            # fromisoformat() only accepts the 'Z' suffix from Python 3.11 on
            instant = datetime.datetime.fromisoformat(instant.strip().replace('Z', '+00:00'))
        except ValueError as e:
            raise InvalidInput(f'Cannot parse instant {instant!r}: {e}') from e

    if isinstance(instant, datetime.datetime):
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise InvalidInput(f'Instant {instant.isoformat()} has no timezone.')
        return (instant - UNIX_EPOCH) / datetime.timedelta(milliseconds=1)

    if isinstance(instant, np.datetime64):
        if np.isnat(instant):
            raise InvalidInput('Instant is NaT.')
        # datetime64 counts from the Unix epoch without leap seconds, same as UTC above
        return float((instant - np.datetime64(0, 'ms')) / np.timedelta64(1, 'ms'))

    if isinstance(instant, (int, float, np.integer, np.floating)) and not isinstance(instant, bool):
        if not math.isfinite(instant):
            raise InvalidInput(f'Instant {instant} is not finite.')
        return float(instant)

    raise InvalidInput(f'Unsupported instant type {type(instant).__name__}.')

def millennia_since_j2000(instant) -> float:
    """
    Julian millennia since J2000.0 (TT) for the given instant.
    """
    ms = unix_milliseconds(instant) - J2000_UNIX_MS + TT_MINUS_UTC_MS
    return ms / MS_PER_DAY / DAYS_PER_MILLENNIUM
