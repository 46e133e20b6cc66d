"""
Human-readable report lines for query results.

Pure string formatting; every number passes through ``format_number`` so
the decimal separator and precision come from an explicit FormatConfig.
"""

from typing import Mapping, Optional

import numpy as np

from config import DEFAULT_FORMAT, FormatConfig, MIN_SUNSHINE_HOURS

AVERAGE_RAINFALL = "# Average rainfall in the {location}: {average} mm"
NO_RAINFALL = "# No rainfall measurements in the {location}"
LONGEST_SUNSHINE = (
    "Longest sunshine period was on {date}.\n"
    "It lasted for {hours} hours.\n"
    "Max temperature on that date was {max_temp} °C.\n\n"
)
NO_SUNSHINE = "No observations with at least {hours} hours of sunshine.\n\n"
FISHING_DAYS = "Amount of days suitable for fishing: {count}"
FISHING_DAYS_WITH_DIRECTION = (
    "Amount of days suitable for fishing when wind\n"
    " has only w, wsw, sw, ssw and s directions: {count}"
)
GROUP_COUNT = "Amount of groups of observations grouped by location name: {count}"
GROUP_SIZE = "Amount of observations in group from the {location}: {count}"
RAINY_WARM_DAYS = (
    "Amount of rainy days when max temperature\n"
    " was at least 20 °C: {count}"
)
NORMAL_PRESSURE_DAYS = "Amount of days with normal pressure from 1000 to 1007 hPa: {count}"


def format_number(value: float, fmt: FormatConfig = DEFAULT_FORMAT) -> str:
    """Positional notation; shortest round-trip digits unless a precision is set."""
    if fmt.precision is None:
        text = np.format_float_positional(float(value), trim="0")
    else:
        text = f"{value:.{fmt.precision}f}"
    if fmt.decimal_separator != ".":
        text = text.replace(".", fmt.decimal_separator)
    return text


def average_rainfall_line(
    location: str,
    average: Optional[float],
    fmt: FormatConfig = DEFAULT_FORMAT,
) -> str:
    """Summary line for one location group; None means no rainfall data."""
    if average is None:
        return NO_RAINFALL.format(location=location)
    return AVERAGE_RAINFALL.format(location=location, average=format_number(average, fmt))


def longest_sunshine_report(
    date_label: Optional[str],
    hours: Optional[float],
    max_temp: Optional[str],
    fmt: FormatConfig = DEFAULT_FORMAT,
) -> str:
    if date_label is None or hours is None:
        return NO_SUNSHINE.format(hours=format_number(MIN_SUNSHINE_HOURS, fmt))
    return LONGEST_SUNSHINE.format(
        date=date_label,
        hours=format_number(hours, fmt),
        max_temp=max_temp,
    )


def statistics_report(
    fishing_days: int,
    fishing_days_with_direction: int,
    location_counts: Mapping[str, int],
    rainy_warm_days: int,
    normal_pressure_days: int,
) -> str:
    lines = [
        FISHING_DAYS.format(count=fishing_days),
        FISHING_DAYS_WITH_DIRECTION.format(count=fishing_days_with_direction),
        GROUP_COUNT.format(count=len(location_counts)),
    ]
    lines.extend(
        GROUP_SIZE.format(location=location, count=count)
        for location, count in location_counts.items()
    )
    lines.append(RAINY_WARM_DAYS.format(count=rainy_warm_days))
    lines.append(NORMAL_PRESSURE_DAYS.format(count=normal_pressure_days))
    return "\n".join(lines) + "\n"
