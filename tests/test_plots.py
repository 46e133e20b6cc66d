"""Smoke tests for visualization plot functions.

Each test verifies that the function returns a valid Plotly Figure
without raising exceptions. These are not pixel-perfect tests —
they just confirm the functions work end-to-end with representative
inputs.
"""

import sys
import os
import plotly.graph_objects as go

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from visualization.plots import create_rainfall_figure, create_sunshine_figure


class TestRainfallFigure:
    def test_returns_figure(self, sample_table):
        fig = create_rainfall_figure(sample_table.group_by_location())
        assert isinstance(fig, go.Figure)
        assert list(fig.data[0].x) == ["Albury", "Perth", "Sydney"]

    def test_location_without_rainfall_has_no_bar(self, sample_table):
        fig = create_rainfall_figure(sample_table.group_by_location())
        assert fig.data[0].y[1] is None

    def test_empty(self):
        fig = create_rainfall_figure([])
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 0


class TestSunshineFigure:
    def test_returns_figure_with_highlight(self, sample_table):
        result = sample_table.longest_sunshine()
        fig = create_sunshine_figure(result.observations, result.longest)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
        assert list(fig.data[1].y) == [11.8]

    def test_without_longest(self, sample_table):
        result = sample_table.longest_sunshine()
        fig = create_sunshine_figure(result.observations)
        assert len(fig.data) == 1

    def test_empty(self):
        fig = create_sunshine_figure([])
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 0
