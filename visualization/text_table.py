"""
Fixed-width text rendering of observation tables.

Produces bordered, column-aligned blocks for console display.  Long
sequences keep only their first and last rows with placeholder rows in
between to show that rows were omitted.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from config import (
    BORDER_GLYPH,
    SEPARATOR_GLYPH,
    PLACEHOLDER_GLYPH,
    PLACEHOLDER_ROWS,
    TRUNCATION_MARKER,
    MIN_COLUMN_WIDTH,
)

# Each column costs " # " beyond its width, plus one closing border glyph
SEPARATOR_OVERHEAD = 3


@dataclass(frozen=True)
class ColumnLayout:
    """Column labels and widths shared by every table rendered for one dataset.

    Args:
        names: Header labels, shortened so none exceeds its column width.
        widths: Display width of each column.
    """

    names: Tuple[str, ...]
    widths: Tuple[int, ...]

    @property
    def table_width(self) -> int:
        return sum(self.widths) + SEPARATOR_OVERHEAD * len(self.widths) + 1


def reduce_label(name: str, width: int) -> str:
    """Shorten *name* to *width* characters, ending in the truncation marker."""
    if len(name) <= width:
        return name
    return name[: width - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER


def compute_layout(header: Sequence[str], rows: Iterable[Sequence[str]]) -> ColumnLayout:
    """Compute column widths from the data rows and fit the header to them.

    Column width is the longest field in that column across all rows
    (never less than MIN_COLUMN_WIDTH).  Header labels do not contribute
    to the width; labels that are too long are shortened instead.

    Args:
        header: Column names from the first line of the file.
        rows: Field arrays, each exactly ``len(header)`` long.

    Returns:
        ColumnLayout with one width per header column.
    """
    widths = [MIN_COLUMN_WIDTH] * len(header)
    for fields in rows:
        for i, value in enumerate(fields):
            if len(value) > widths[i]:
                widths[i] = len(value)
    names = tuple(reduce_label(name, w) for name, w in zip(header, widths))
    return ColumnLayout(names=names, widths=tuple(widths))


class TextTableRenderer:
    """Render rows of field strings using a fixed ColumnLayout.

    Args:
        layout: Column labels and widths.
        border: Glyph used for horizontal border lines and the outer edges.
        separator: Glyph placed between columns.
        placeholder: Cell content of the rows that stand in for omitted rows.
    """

    def __init__(
        self,
        layout: ColumnLayout,
        border: str = BORDER_GLYPH,
        separator: str = SEPARATOR_GLYPH,
        placeholder: str = PLACEHOLDER_GLYPH,
    ):
        self.layout = layout
        self.border = border
        self.separator = separator
        self.placeholder = placeholder

    @property
    def width(self) -> int:
        return self.layout.table_width

    def border_line(self) -> str:
        return self.border * self.width

    def format_row(self, cells: Sequence[str]) -> str:
        padded = [cell.ljust(w) for cell, w in zip(cells, self.layout.widths)]
        inner = f" {self.separator} ".join(padded)
        return f"{self.border} {inner} {self.border}"

    def header_lines(self) -> List[str]:
        return [
            self.border_line(),
            self.format_row(self.layout.names),
            self.border_line(),
        ]

    def summary_line(self, text: str) -> str:
        """A free-text line padded to the table width and closed by the border."""
        return text.ljust(self.width - 1) + self.border

    def body_lines(self, rows: Sequence[Sequence[str]], head_tail: int = -1) -> List[str]:
        """Format data rows, truncating long sequences.

        When *head_tail* is positive and there are more than ``2 * head_tail``
        rows, only the first and last *head_tail* rows are kept with
        PLACEHOLDER_ROWS placeholder rows between them.
        """
        if head_tail <= 0 or len(rows) <= 2 * head_tail:
            return [self.format_row(r) for r in rows]

        filler = [self.placeholder] * len(self.layout.widths)
        lines = [self.format_row(r) for r in rows[:head_tail]]
        lines.extend(self.format_row(filler) for _ in range(PLACEHOLDER_ROWS))
        lines.extend(self.format_row(r) for r in rows[-head_tail:])
        return lines

    def render(self, rows: Sequence[Sequence[str]], head_tail: int = -1) -> str:
        """Full table: header block, body and closing border."""
        lines = self.header_lines()
        lines.extend(self.body_lines(rows, head_tail))
        lines.append(self.border_line())
        return "\n".join(lines) + "\n"

    def render_partial(self, rows: Sequence[Sequence[str]], head_tail: int = -1) -> str:
        """Body rows only, for composing several groups into one table."""
        lines = self.body_lines(rows, head_tail)
        return "".join(line + "\n" for line in lines)

    def render_from_content(self, content: str, closing_border: bool = True) -> str:
        """Wrap already formatted body text with the header block."""
        text = "\n".join(self.header_lines()) + "\n" + content
        if closing_border:
            text += self.border_line() + "\n"
        return text
