"""Conversion between timezone-aware datetimes and fractional Julian days.

Instants are handled in whole Unix seconds: inputs are floored to the
second and outputs are truncated toward zero.
"""

import math
from datetime import datetime as DateTime, tzinfo

J2000_EPOCH = 2451545.0
J2000_UNIX_TIME = 946728000
SECONDS_PER_DAY = 86400.0


def require_aware(dt: DateTime) -> DateTime:
    """Return dt unchanged, or raise ValueError if it carries no timezone."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError("dt must be timezone-aware")
    return dt


def unix_seconds(dt: DateTime) -> int:
    return math.floor(require_aware(dt).timestamp())


def julian_day(dt: DateTime) -> float:
    """Julian day of the absolute instant dt."""
    return (unix_seconds(dt) - J2000_UNIX_TIME) / SECONDS_PER_DAY + J2000_EPOCH


def from_julian_day(jd: float, tz: tzinfo) -> DateTime:
    """Datetime in tz for the fractional Julian day jd."""
    unix = J2000_UNIX_TIME + int((jd - J2000_EPOCH) * SECONDS_PER_DAY)
    return DateTime.fromtimestamp(unix, tz)
