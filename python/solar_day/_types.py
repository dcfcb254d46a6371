"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass
from datetime import date, datetime as DateTime, timedelta, tzinfo
from enum import StrEnum


class Phase(StrEnum):
    DAY = "day"
    NIGHT = "night"


@dataclass(frozen=True)
class DayOrNight:
    """Phase of an instant and the half-open [start, end) window it falls in."""

    phase: Phase
    start: DateTime
    end: DateTime


@dataclass(frozen=True)
class SunriseSunset:
    date: date
    sunrise: DateTime
    sunset: DateTime
    day_length: timedelta


@dataclass(frozen=True)
class TableMetadata:
    generated_at: str
    total_entries: int


@dataclass(frozen=True)
class DaylightTableConfig:
    latitude: float = 39.8
    longitude: float = -89.6
    days: int = 7


@dataclass(frozen=True)
class DaylightTable:
    config: DaylightTableConfig
    timezone: tzinfo
    days: list[SunriseSunset]
    metadata: TableMetadata
