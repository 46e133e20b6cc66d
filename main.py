"""
Weather Observation Table Analyzer — Streamlit Interface.

Run with:  streamlit run main.py
"""

import sys
import os
import logging

# Ensure the project root is on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import streamlit as st

from data.loader import decode_lines, validate_header
from models.table import Table
from visualization.plots import create_rainfall_figure, create_sunshine_figure
from config import (
    DEFAULT_LOCATION,
    DEFAULT_YEARS,
    FormatConfig,
    GROUP_HEAD_TAIL,
    LOCATION_EXPORT_NAME,
    RAINFALL_EXPORT_NAME,
    SAMPLE_DATA_PATH,
    SUNSHINE_EXPORT_NAME,
    TABLE_HEAD_TAIL,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@st.cache_resource(max_entries=4)
def load_table(data: bytes, decimal_separator: str, precision: int) -> Table:
    """Build the table once per uploaded file and format setting."""
    lines = decode_lines(data)
    validate_header(lines)
    fmt = FormatConfig(
        decimal_separator=decimal_separator,
        precision=None if precision < 0 else precision,
    )
    return Table(lines, fmt)


# ── Page Config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Table Analyzer",
    page_icon="🌦",
    layout="wide",
)

st.title("Weather Observation Table Analyzer")
st.markdown(
    "Filters, ranks and summarises daily weather observations from a "
    "weatherAUS-style CSV file. Every result can be downloaded as CSV "
    "with the original rows unchanged."
)

# ── Sidebar Controls ─────────────────────────────────────────────────────────

st.sidebar.header("Data File")
uploaded = st.sidebar.file_uploader("CSV file", type=["csv"])

st.sidebar.header("Display")
table_rows = st.sidebar.slider(
    "Rows shown from each end of a table",
    min_value=1,
    max_value=100,
    value=TABLE_HEAD_TAIL,
)
group_rows = st.sidebar.slider(
    "Rows shown from each end of a location group",
    min_value=1,
    max_value=50,
    value=GROUP_HEAD_TAIL,
)
decimal_separator = st.sidebar.selectbox("Decimal separator", [".", ","])
precision = st.sidebar.number_input(
    "Fraction digits (-1 = shortest)", min_value=-1, max_value=10, value=-1
)

if uploaded is not None:
    raw_bytes = uploaded.getvalue()
    source_name = uploaded.name
else:
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), SAMPLE_DATA_PATH), "rb") as f:
        raw_bytes = f.read()
    source_name = "bundled sample"

try:
    table = load_table(raw_bytes, decimal_separator, int(precision))
except (UnicodeDecodeError, ValueError) as e:
    st.error(f"Could not load {source_name}: {e}")
    st.stop()

c1, c2, c3 = st.columns(3)
c1.metric("Observations", len(table))
c2.metric("Rejected Rows", table.rejected_count)
c3.metric("Locations", len(table.locations()))
st.caption(f"Source: {source_name}")

tab_location, tab_rainfall, tab_sunshine, tab_stats = st.tabs(
    ["Location & Years", "Rainfall by Location", "Sunshine", "Statistics"]
)

with tab_location:
    locations = table.locations()
    default_index = locations.index(DEFAULT_LOCATION) if DEFAULT_LOCATION in locations else 0
    location = st.selectbox("Location", locations, index=default_index) if locations else ""
    all_years = table.years()
    years = st.multiselect(
        "Years",
        all_years,
        default=[y for y in DEFAULT_YEARS if y in all_years],
    )
    result = table.filter_by_location_and_years(location, years, table_rows)
    st.write(f"{len(result.observations)} observations")
    st.code(result.text, language=None)
    st.download_button("Download CSV", result.csv, file_name=LOCATION_EXPORT_NAME, mime="text/csv")

with tab_rainfall:
    result = table.rainfall_by_location(group_rows)
    st.plotly_chart(create_rainfall_figure(result.groups), use_container_width=True)
    st.code(result.text, language=None)
    st.download_button("Download CSV", result.csv, file_name=RAINFALL_EXPORT_NAME, mime="text/csv",
                       key="rainfall_download")

with tab_sunshine:
    result = table.longest_sunshine(table_rows)
    st.text(result.report)
    st.plotly_chart(create_sunshine_figure(result.observations, result.longest), use_container_width=True)
    st.code(result.text, language=None)
    st.download_button("Download CSV", result.csv, file_name=SUNSHINE_EXPORT_NAME, mime="text/csv",
                       key="sunshine_download")

with tab_stats:
    stats = table.statistics()
    s1, s2, s3, s4 = st.columns(4)
    s1.metric("Fishing Days", stats.fishing_days)
    s2.metric("Fishing Days (W–S wind)", stats.fishing_days_with_direction)
    s3.metric("Rainy Warm Days", stats.rainy_warm_days)
    s4.metric("Normal Pressure Days", stats.normal_pressure_days)
    st.code(stats.report(), language=None)
