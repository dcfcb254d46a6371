"""Sunrise, sunset and day/night classification.

Implements the sunrise equation (https://en.wikipedia.org/wiki/Sunrise_equation).
Computed times can differ from NOAA's solar calculator by a couple of
minutes.

Latitude is positive for north and negative for south; longitude is
positive for east and negative for west. Latitude must lie strictly
between -90 and 90: at the poles cos(latitude) is zero and the hour
angle is undefined.
"""

import dataclasses
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime as DateTime, timedelta, timezone, tzinfo

from ._types import DayOrNight, Phase
from .angles import acos_deg, asin_deg, cos_deg, normalize_angle, sin_deg
from .julian import J2000_EPOCH, from_julian_day, julian_day, require_aware

logger = logging.getLogger(__name__)

EARTH_AXIAL_TILT = 23.45
SOLAR_ELEVATION = -0.83  # sun's centre at sunrise, refraction and disc radius included
JULIAN_LEAP = 0.0009


def compute_solar_noon_hour_angle(
    jstar: float, sin_lat: float, cos_lat: float
) -> tuple[float, float]:
    """Compute true solar noon and the half-day hour angle for a solar day.

    Args:
        jstar: Fractional Julian day of the nominal solar noon
        sin_lat: sin(latitude)
        cos_lat: cos(latitude)

    Returns:
        (solar_noon, hour_angle_in_days); solar_noon is a fractional Julian
        day and hour_angle_in_days ranges from 0 (polar night) to 0.5
        (midnight sun).
    """
    ma = normalize_angle(357.5291 + 0.98560028 * (jstar - J2000_EPOCH))
    center = 1.9148 * sin_deg(ma) + 0.02 * sin_deg(2.0 * ma) + 0.0003 * sin_deg(3.0 * ma)
    el = normalize_angle(ma + 102.9372 + center + 180.0)
    solar_noon = jstar + 0.0053 * sin_deg(ma) - 0.0069 * sin_deg(2.0 * el)
    declination = asin_deg(sin_deg(el) * sin_deg(EARTH_AXIAL_TILT))
    cos_h = (sin_deg(SOLAR_ELEVATION) - sin_lat * sin_deg(declination)) / (
        cos_lat * cos_deg(declination)
    )
    return solar_noon, acos_deg(cos_h) / 360.0


def nearest_jstar(jd: float, longitude: float) -> float:
    """Snap a Julian day to the nearest nominal solar noon at longitude."""
    return (
        math.floor(jd - JULIAN_LEAP + longitude / 360.0 + 0.5)
        + JULIAN_LEAP
        - longitude / 360.0
    )


@dataclass(frozen=True)
class SolarDay:
    """One solar day at a fixed latitude.

    solar_noon and hour_angle_in_days are derived from jstar and the
    latitude on construction. Use around() to build one and shift_days()
    to move to another day; both return new values.
    """

    tz: tzinfo
    sin_lat: float
    cos_lat: float
    jstar: float
    solar_noon: float = field(init=False)
    hour_angle_in_days: float = field(init=False)

    def __post_init__(self):
        solar_noon, hour_angle_in_days = compute_solar_noon_hour_angle(
            self.jstar, self.sin_lat, self.cos_lat
        )
        object.__setattr__(self, "solar_noon", solar_noon)
        object.__setattr__(self, "hour_angle_in_days", hour_angle_in_days)

    @classmethod
    def around(cls, latitude: float, longitude: float, dt: DateTime) -> "SolarDay":
        """Solar day whose noon is nearest dt.

        The computed sunrise is generally no earlier than 24 hours before dt
        and the sunset no later than 24 hours after it, though the spread can
        exceed 24 hours on days with more than 23 hours of daylight. Returned
        times are in dt's timezone.
        """
        require_aware(dt)
        day = cls(
            tz=dt.tzinfo,
            sin_lat=sin_deg(latitude),
            cos_lat=cos_deg(latitude),
            jstar=nearest_jstar(julian_day(dt), longitude),
        )
        logger.debug(
            "Anchored solar day at (%s, %s) around %s: jstar=%.6f",
            latitude,
            longitude,
            dt.isoformat(),
            day.jstar,
        )
        return day

    def shift_days(self, days: int) -> "SolarDay":
        """Same location, days later (earlier if negative)."""
        return dataclasses.replace(self, jstar=self.jstar + days)

    @property
    def sunrise(self) -> DateTime:
        return from_julian_day(self.solar_noon - self.hour_angle_in_days, self.tz)

    @property
    def sunset(self) -> DateTime:
        return from_julian_day(self.solar_noon + self.hour_angle_in_days, self.tz)

    @property
    def solar_noon_time(self) -> DateTime:
        return from_julian_day(self.solar_noon, self.tz)

    @property
    def day_length(self) -> timedelta:
        """Time from sunrise to sunset: 24h under midnight sun, zero in polar night."""
        return _utc(self.sunset) - _utc(self.sunrise)

    @property
    def is_polar_day(self) -> bool:
        return self.hour_angle_in_days == 0.5

    @property
    def is_polar_night(self) -> bool:
        return self.hour_angle_in_days == 0.0


def _utc(dt: DateTime) -> DateTime:
    # aware datetimes sharing a tzinfo compare by wall clock, which breaks across DST
    return dt.astimezone(timezone.utc)


def anchor(latitude: float, longitude: float, dt: DateTime) -> SolarDay:
    """Solar day at latitude/longitude whose noon is nearest dt."""
    return SolarDay.around(latitude, longitude, dt)


def shift_days(day: SolarDay, days: int) -> SolarDay:
    return day.shift_days(days)


def sunrise(day: SolarDay) -> DateTime:
    return day.sunrise


def sunset(day: SolarDay) -> DateTime:
    return day.sunset


def solar_noon(day: SolarDay) -> DateTime:
    return day.solar_noon_time


def day_length(day: SolarDay) -> timedelta:
    return day.day_length


def day_or_night(latitude: float, longitude: float, instant: DateTime) -> DayOrNight:
    """Classify instant as day or night at the given location.

    Returns the phase together with the start and end of the current day or
    night, in instant's timezone, with start <= instant < end. An instant
    exactly at sunrise is day; one exactly at sunset is night.

    Under the midnight sun consecutive day windows rarely meet exactly.
    When solar noon moves earlier they overlap and the instant is day. When
    it moves later a night of a few seconds separates one sunset from the
    next sunrise.
    """
    day = SolarDay.around(latitude, longitude, instant)
    now = _utc(instant)
    start = day.sunrise
    end = day.sunset

    if _utc(start) <= now < _utc(end):
        return DayOrNight(Phase.DAY, start, end)

    if now >= _utc(end):
        # after today's sunset: night runs until tomorrow's sunrise
        day = day.shift_days(1)
        start = end
        end = day.sunrise
        if now >= _utc(end):
            logger.debug("No night before %s; midnight sun at (%s, %s)", end, latitude, longitude)
            return DayOrNight(Phase.DAY, end, day.sunset)
        return DayOrNight(Phase.NIGHT, start, end)

    # before today's sunrise: night started at yesterday's sunset
    day = day.shift_days(-1)
    end = start
    start = day.sunset
    if now < _utc(start):
        logger.debug("No night after %s; midnight sun at (%s, %s)", start, latitude, longitude)
        return DayOrNight(Phase.DAY, day.sunrise, start)
    return DayOrNight(Phase.NIGHT, start, end)
