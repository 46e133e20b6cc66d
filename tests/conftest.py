"""Shared fixtures for the Weather Observation Table Analyzer test suite."""

import sys
import os
import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import REFERENCE_HEADER

SAMPLE_CSV = os.path.join(os.path.dirname(__file__), "..", "data", "samples", "weather_sample.csv")


def make_row(
    date="2009-01-01",
    location="Sydney",
    max_temp="25.0",
    rainfall="0.0",
    sunshine="8.0",
    wind_dir="N",
    wind_speed="20",
    pressure="1015.0",
    rain_today="No",
):
    """Build a 23-field weatherAUS row with the consumed columns set."""
    fields = ["NA"] * 23
    fields[0] = date
    fields[1] = location
    fields[3] = max_temp
    fields[4] = rainfall
    fields[6] = sunshine
    fields[10] = wind_dir
    fields[12] = wind_speed
    fields[15] = pressure
    fields[21] = rain_today
    fields[22] = "No"
    return ",".join(fields)


@pytest.fixture
def header():
    return REFERENCE_HEADER


@pytest.fixture
def sample_lines():
    """Decoded lines of the bundled sample file (header first)."""
    with open(SAMPLE_CSV, encoding="utf-8") as f:
        return f.read().splitlines()


@pytest.fixture
def sample_table(sample_lines):
    from models.table import Table
    return Table(sample_lines)


@pytest.fixture
def row_factory():
    return make_row
