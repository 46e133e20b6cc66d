"""
Visualization module for the Weather Observation Table Analyzer.

Provides Plotly-based interactive plots for the Streamlit interface.
"""

from typing import List, Optional

import plotly.graph_objects as go

from config import MIN_SUNSHINE_HOURS
from models.observation import Observation
from models.table import LocationGroup


def _empty_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, showarrow=False)
    return fig


def create_rainfall_figure(groups: List[LocationGroup]) -> go.Figure:
    """Bar chart of average rainfall per location.

    Locations without any rainfall measurement are listed on the axis
    with no bar and are named in the hover text.
    """
    if not groups:
        return _empty_figure("No observations loaded")

    locations = [g.location for g in groups]
    averages = [g.average_rainfall for g in groups]
    counts = [len(g.observations) for g in groups]
    notes = ["" if a is not None else "no rainfall measurements" for a in averages]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=locations,
            y=averages,
            name="Average Rainfall",
            marker_color="steelblue",
            customdata=list(zip(counts, notes)),
            hovertemplate=(
                "%{x}<br>"
                "Average: %{y:.2f} mm<br>"
                "Observations: %{customdata[0]}<br>"
                "%{customdata[1]}<extra></extra>"
            ),
        )
    )

    fig.update_layout(
        title="Average Rainfall by Location",
        xaxis_title="Location",
        yaxis_title="Rainfall (mm)",
        template="plotly_dark",
        height=350,
    )
    return fig


def create_sunshine_figure(
    observations: List[Observation],
    longest: Optional[Observation] = None,
) -> go.Figure:
    """Scatter of sunshine hours over time, highlighting the longest period."""
    if not observations:
        return _empty_figure(f"No observations with at least {MIN_SUNSHINE_HOURS} hours of sunshine")

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[o.date for o in observations],
            y=[o.sunshine.as_float() for o in observations],
            mode="markers",
            name="Sunshine",
            marker=dict(color="gold", size=6),
            text=[o.location for o in observations],
            hovertemplate="%{text}<br>%{x}<br>%{y:.1f} h<extra></extra>",
        )
    )

    if longest is not None:
        fig.add_trace(
            go.Scatter(
                x=[longest.date],
                y=[longest.sunshine.as_float()],
                mode="markers",
                name="Longest",
                marker=dict(color="red", size=14, symbol="star"),
                hovertemplate=(
                    f"Longest: {longest.date_label}<br>"
                    f"Max temp: {longest.max_temp.token} °C<extra></extra>"
                ),
            )
        )

    fig.add_hline(y=MIN_SUNSHINE_HOURS, line_dash="dash", line_color="gray")
    fig.update_layout(
        title="Sunshine Hours",
        xaxis_title="Date",
        yaxis_title="Sunshine (hours)",
        template="plotly_dark",
        height=350,
    )
    return fig
