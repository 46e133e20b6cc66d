"""Tests for fixed-width text table layout and rendering."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from visualization.text_table import (
    ColumnLayout,
    TextTableRenderer,
    compute_layout,
    reduce_label,
)


def _rows(n):
    return [(f"r{i}", "x" * (i % 3 + 1)) for i in range(n)]


@pytest.fixture
def renderer():
    layout = compute_layout(("Name", "Value"), [("alpha", "1"), ("b", "22")])
    return TextTableRenderer(layout)


class TestComputeLayout:
    def test_width_is_longest_field(self):
        layout = compute_layout(("A", "B"), [("abc", "1"), ("a", "12345")])
        assert layout.widths == (3, 5)

    def test_header_does_not_widen_column(self):
        layout = compute_layout(("Location", "X"), [("Perth", "1")])
        assert layout.widths == (5, 1)
        assert layout.names == ("Loca.", "X")

    def test_short_header_kept(self):
        layout = compute_layout(("Date",), [("2009-01-01",)])
        assert layout.names == ("Date",)

    def test_empty_column_has_minimum_width(self):
        layout = compute_layout(("Evaporation",), [("",)])
        assert layout.widths == (1,)
        assert layout.names == (".",)

    def test_table_width(self):
        layout = ColumnLayout(names=("a", "b"), widths=(3, 5))
        assert layout.table_width == 3 + 5 + 3 * 2 + 1

    def test_reduce_label(self):
        assert reduce_label("Rainfall", 4) == "Rai."
        assert reduce_label("Rain", 4) == "Rain"


class TestRender:
    def test_full_table_structure(self, renderer):
        text = renderer.render([("alpha", "1"), ("b", "22")])
        lines = text.splitlines()
        assert lines[0] == "#" * renderer.width
        assert lines[1] == "# Name  # V. #"
        assert lines[2] == "#" * renderer.width
        assert lines[3] == "# alpha # 1  #"
        assert lines[4] == "# b     # 22 #"
        assert lines[5] == "#" * renderer.width
        assert len(lines) == 6

    def test_every_line_has_table_width(self, renderer):
        for line in renderer.render(_rows(5)).splitlines():
            assert len(line) == renderer.width

    def test_partial_has_no_header_or_border(self, renderer):
        text = renderer.render_partial([("alpha", "1")])
        assert text == "# alpha # 1  #\n"

    def test_render_from_content(self, renderer):
        text = renderer.render_from_content("body\n", closing_border=False)
        lines = text.splitlines()
        assert lines[1].startswith("# Name")
        assert lines[-1] == "body"
        closed = renderer.render_from_content("body\n").splitlines()
        assert closed[-1] == "#" * renderer.width

    def test_summary_line_closed_by_border(self, renderer):
        line = renderer.summary_line("# hi")
        assert len(line) == renderer.width
        assert line.endswith("#")


class TestTruncation:
    def _count(self, renderer, rows, n):
        body = renderer.body_lines(rows, n)
        placeholders = [line for line in body if "…" in line]
        real = [line for line in body if "…" not in line]
        return len(real), len(placeholders)

    def test_long_sequence_truncated(self):
        layout = compute_layout(("a", "b"), _rows(25))
        r = TextTableRenderer(layout)
        assert self._count(r, _rows(25), 5) == (10, 3)

    def test_exactly_twice_threshold_not_truncated(self):
        layout = compute_layout(("a", "b"), _rows(10))
        r = TextTableRenderer(layout)
        assert self._count(r, _rows(10), 5) == (10, 0)

    def test_one_over_threshold_truncated(self):
        layout = compute_layout(("a", "b"), _rows(3))
        r = TextTableRenderer(layout)
        assert self._count(r, _rows(3), 1) == (2, 3)

    def test_keeps_head_and_tail(self):
        rows = _rows(30)
        r = TextTableRenderer(compute_layout(("a", "b"), rows))
        body = r.body_lines(rows, 2)
        assert body[0].startswith("# r0 ")
        assert body[1].startswith("# r1 ")
        assert body[-2].startswith("# r28")
        assert body[-1].startswith("# r29")

    def test_non_positive_threshold_renders_all(self):
        rows = _rows(50)
        r = TextTableRenderer(compute_layout(("a", "b"), rows))
        assert self._count(r, rows, 0) == (50, 0)
        assert self._count(r, rows, -1) == (50, 0)

    def test_placeholder_rows_padded(self):
        rows = _rows(7)
        r = TextTableRenderer(compute_layout(("a", "b"), rows))
        filler = r.body_lines(rows, 1)[1]
        assert len(filler) == r.width
