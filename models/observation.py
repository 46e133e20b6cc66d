"""
Observation data model for one row of a weather-observation table.

Each numeric field is kept as a Reading: the original token from the
file together with the parsed value, or no value when the token is the
missing-value sentinel. The full field array and the untouched source
line are retained so that exports reproduce the input byte for byte.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from config import (
    FIELD_DELIMITER,
    MISSING_TOKEN,
    YES_TOKEN,
    COL_DATE,
    COL_LOCATION,
    COL_MAX_TEMP,
    COL_RAINFALL,
    COL_SUNSHINE,
    COL_WIND_DIR,
    COL_WIND_SPEED,
    COL_PRESSURE,
    COL_RAIN_TODAY,
    MIN_PARSE_COLUMNS,
    DATE_FORMATS,
)


@dataclass(frozen=True)
class Reading:
    """A numeric measurement that is either present or missing.

    Args:
        token: The field exactly as it appeared in the source line.
        value: Parsed number, or None when the token is the missing sentinel.
    """

    token: str
    value: Optional[float]

    @classmethod
    def parse(cls, token: str) -> "Reading":
        """Build a Reading from a raw token.

        Only the sentinel token means "missing". Any other token that is
        not a number is treated as a present reading of 0.0.
        """
        if token == MISSING_TOKEN:
            return cls(token=token, value=None)
        try:
            value = float(token)
        except ValueError:
            return cls(token=token, value=0.0)
        # NaN would break the rainfall ordering
        if math.isnan(value):
            value = 0.0
        return cls(token=token, value=value)

    @property
    def missing(self) -> bool:
        return self.value is None

    @property
    def present(self) -> bool:
        return self.value is not None

    def as_float(self) -> float:
        """Typed value with missing readings reported as 0.0."""
        return 0.0 if self.value is None else self.value

    def __str__(self) -> str:
        return self.token


def parse_date(token: str) -> date:
    """Parse a date token, falling back to ``date.min`` when unparsable."""
    text = token.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return date.min


@dataclass(frozen=True)
class Observation:
    """A single weather observation (one location on one date).

    Args:
        date: Observation date, ``date.min`` when the field was unparsable.
        location: Location name exactly as recorded.
        max_temp: Maximum temperature (degrees C).
        rainfall: Rainfall (mm).
        sunshine: Bright sunshine (hours).
        wind_dir: Afternoon wind direction token.
        wind_speed: Afternoon wind speed (as recorded, no unit conversion).
        pressure: Morning pressure.
        rain_today_token: Raw rain-today token; the flag is derived from it.
        fields: Field strings padded/truncated to the table's field count.
        raw: The original source line.
    """

    date: date
    location: str
    max_temp: Reading
    rainfall: Reading
    sunshine: Reading
    wind_dir: str
    wind_speed: Reading
    pressure: Reading
    rain_today_token: str
    fields: Tuple[str, ...]
    raw: str

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def rain_today(self) -> bool:
        return self.rain_today_token == YES_TOKEN

    @property
    def date_label(self) -> str:
        """Date as ``Y-M-D`` without zero padding."""
        return f"{self.date.year}-{self.date.month}-{self.date.day}"

    def __str__(self) -> str:
        return self.raw


def parse_observation(line: str, field_count: int) -> Optional[Observation]:
    """Parse one delimited line into an Observation.

    Args:
        line: Raw text line from the data file (without line terminator).
        field_count: Number of columns declared by the header.

    Returns:
        The Observation, or None when the line is blank and must be
        excluded from the table.
    """
    if field_count < 1:
        raise ValueError("field_count must be >= 1")
    if not line or not line.strip():
        return None

    tokens = line.strip().split(FIELD_DELIMITER)
    # Short rows are padded so every fixed position can be read
    width = max(field_count, MIN_PARSE_COLUMNS)
    if len(tokens) < width:
        tokens.extend([""] * (width - len(tokens)))

    return Observation(
        date=parse_date(tokens[COL_DATE]),
        location=tokens[COL_LOCATION],
        max_temp=Reading.parse(tokens[COL_MAX_TEMP]),
        rainfall=Reading.parse(tokens[COL_RAINFALL]),
        sunshine=Reading.parse(tokens[COL_SUNSHINE]),
        wind_dir=tokens[COL_WIND_DIR],
        wind_speed=Reading.parse(tokens[COL_WIND_SPEED]),
        pressure=Reading.parse(tokens[COL_PRESSURE]),
        rain_today_token=tokens[COL_RAIN_TODAY],
        fields=tuple(tokens[:field_count]),
        raw=line,
    )


def compare_rainfall(first: Observation, second: Observation) -> int:
    """Order observations by rainfall, largest first, missing values last.

    Returns a negative number when *first* sorts before *second*, zero
    when they are equal and a positive number otherwise. Use with
    ``functools.cmp_to_key``.
    """
    a, b = first.rainfall, second.rainfall
    if a.missing and b.missing:
        return 0
    if a.missing:
        return 1
    if b.missing:
        return -1
    if a.value < b.value:
        return 1
    if a.value == b.value:
        return 0
    return -1
