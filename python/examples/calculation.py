"""Show sunrise and sunset for the first five days of June 2013 in Los Angeles."""

from datetime import datetime
from zoneinfo import ZoneInfo

from solar_day._types import DaylightTableConfig
from solar_day.sunrise import day_or_night
from solar_day.table import generate_daylight_table


def main():
    latitude = 34.05
    longitude = -118.25

    start = datetime(2013, 6, 1, tzinfo=ZoneInfo("America/Los_Angeles"))
    config = DaylightTableConfig(latitude=latitude, longitude=longitude, days=5)
    table = generate_daylight_table(config, start)

    print("=== Sunrise/Sunset Example ===")
    print(f"Location: Los Angeles ({latitude:.2f}°N, {-longitude:.2f}°W)")
    print()
    for entry in table.days:
        print(
            f"Sunrise: {entry.sunrise:%b %d %H:%M:%S} "
            f"Sunset: {entry.sunset:%b %d %H:%M:%S} "
            f"({entry.day_length})"
        )
    print()
    result = day_or_night(latitude, longitude, start)
    print(f"At {start}: {result.phase} from {result.start} until {result.end}")


if __name__ == "__main__":
    main()
