"""
Global configuration and constants for the Weather Observation Table Analyzer.
"""

from dataclasses import dataclass
from typing import Optional

# --- Source Format ---
FIELD_DELIMITER = ","
MISSING_TOKEN = "NA"        # Marks a missing measurement in any field
YES_TOKEN = "Yes"           # Only this exact token sets a boolean flag

# First line of weatherAUS.csv; other headers are accepted with a warning
REFERENCE_HEADER = (
    "Date,Location,MinTemp,MaxTemp,Rainfall,Evaporation,Sunshine,"
    "WindGustDir,WindGustSpeed,WindDir9am,WindDir3pm,WindSpeed9am,"
    "WindSpeed3pm,Humidity9am,Humidity3pm,Pressure9am,Pressure3pm,"
    "Cloud9am,Cloud3pm,Temp9am,Temp3pm,RainToday,RainTomorrow"
)

# --- Column Positions (0-based) ---
COL_DATE = 0
COL_LOCATION = 1
COL_MAX_TEMP = 3
COL_RAINFALL = 4
COL_SUNSHINE = 6
COL_WIND_DIR = 10           # WindDir3pm
COL_WIND_SPEED = 12         # WindSpeed3pm
COL_PRESSURE = 15           # Pressure9am
COL_RAIN_TODAY = 21
MIN_PARSE_COLUMNS = COL_RAIN_TODAY + 1

# Accepted date layouts, tried in order
DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%Y/%m/%d", "%d.%m.%Y")

# --- Queries ---
MIN_SUNSHINE_HOURS = 4.0
FISHING_MAX_WIND_SPEED = 13.0                             # Strictly below, units as recorded
FISHING_WIND_DIRECTIONS = frozenset({"W", "WSW", "SW", "SSW", "S"})
WARM_DAY_MIN_TEMP = 20.0                                  # degrees C, inclusive
NORMAL_PRESSURE_RANGE = (1000.0, 1007.0)                  # closed range

DEFAULT_LOCATION = "Sydney"
DEFAULT_YEARS = (2009, 2010)

# --- Text Rendering ---
BORDER_GLYPH = "#"
SEPARATOR_GLYPH = "#"
PLACEHOLDER_GLYPH = "…"       # Ellipsis cell for omitted rows
PLACEHOLDER_ROWS = 3
TRUNCATION_MARKER = "."            # Appended to shortened column labels
MIN_COLUMN_WIDTH = 1
TABLE_HEAD_TAIL = 20               # Rows kept from each end in flat queries
GROUP_HEAD_TAIL = 10               # Rows kept from each end per location group

# --- Files ---
DEFAULT_ENCODING = "utf-8"
INPUT_SUFFIX = ".csv"
LOCATION_EXPORT_NAME = "Sydney_2009_2010_weatherAUS.csv"
RAINFALL_EXPORT_NAME = "average_rain_weatherAUS.csv"
SUNSHINE_EXPORT_NAME = "sunshine_weatherAUS.csv"
SAMPLE_DATA_PATH = "data/samples/weather_sample.csv"


@dataclass(frozen=True)
class FormatConfig:
    """Number formatting and text encoding used when producing output.

    Args:
        decimal_separator: Character placed between integer and fraction digits.
        precision: Fixed number of fraction digits, or None for the shortest
            round-trip representation.
        encoding: Encoding used for exported files.
    """

    decimal_separator: str = "."
    precision: Optional[int] = None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self):
        if len(self.decimal_separator) != 1:
            raise ValueError("decimal_separator must be a single character")
        if self.precision is not None and self.precision < 0:
            raise ValueError("precision must be >= 0")


DEFAULT_FORMAT = FormatConfig()
