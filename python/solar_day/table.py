"""Daylight tables: sunrise and sunset for consecutive days at one location.

Tables start at the first sunrise at or after the requested start time and
carry one entry per solar day.
"""

import datetime
from datetime import datetime as DateTime

from ._types import DaylightTable, DaylightTableConfig, SunriseSunset, TableMetadata
from .sunrise import SolarDay

DEFAULT_CONFIG = DaylightTableConfig()


def first_sunrise_after(latitude: float, longitude: float, start: DateTime) -> SolarDay:
    """Solar day whose sunrise is the first one not before start."""
    day = SolarDay.around(latitude, longitude, start)
    while day.sunrise.timestamp() < start.timestamp():
        day = day.shift_days(1)
    return day


def daylight_entry(day: SolarDay) -> SunriseSunset:
    sunrise = day.sunrise
    return SunriseSunset(
        date=sunrise.date(),
        sunrise=sunrise,
        sunset=day.sunset,
        day_length=day.day_length,
    )


def generate_daylight_table(config: DaylightTableConfig, start: DateTime) -> DaylightTable:
    """Generate config.days consecutive sunrise/sunset entries from start."""
    if config.days < 0:
        raise ValueError(f"days must be non-negative: {config.days}")
    day = first_sunrise_after(config.latitude, config.longitude, start)
    days: list[SunriseSunset] = []
    for _ in range(config.days):
        days.append(daylight_entry(day))
        day = day.shift_days(1)

    return DaylightTable(
        config=config,
        timezone=start.tzinfo,
        days=days,
        metadata=TableMetadata(
            generated_at=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            total_entries=len(days),
        ),
    )


def table_to_compact(table: DaylightTable) -> list:
    """Strip metadata and return [sunrise, sunset] ISO 8601 pairs."""
    return [[d.sunrise.isoformat(), d.sunset.isoformat()] for d in table.days]
