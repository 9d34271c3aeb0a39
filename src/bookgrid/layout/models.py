"""
Module: layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing lines, positioned words and pages.

Key Classes:
    - InputShape: Whether input records are lines or words
    - TextLine: A source line assigned to a page
    - GridCell: Position of a page in the page grid
    - WordBox: A word with its page, line and bounding box
    - LayoutResult: Final layout output

Dependencies:
    - pandas: Tabular output for renderers
    - dataclasses (std)

Used By:
    - layout.paginator: Creates TextLines
    - layout.grid: Creates GridCells
    - layout.composer: Creates WordBoxes and LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import pandas as pd


# Column order of the output table
LAYOUT_COLUMNS = ("word", "page", "line", "xmin", "xmax", "ymin", "ymax")

_COLUMN_DTYPES = {
    "word": "object",
    "page": "int64",
    "line": "int64",
    "xmin": "float64",
    "xmax": "float64",
    "ymin": "float64",
    "ymax": "float64",
}


class InputShape(str, Enum):
    """Granularity of the input records."""

    LINES = "lines"
    WORDS = "words"


@dataclass(frozen=True)
class TextLine:
    """
    A source line placed on a page.

    Attributes:
        index: Position of the line in the whole document (1-indexed)
        page: Page number (1-indexed)
        line: Line number within the page (1-indexed)
        text: Raw line text
    """

    index: int
    page: int
    line: int
    text: str


@dataclass(frozen=True)
class GridCell:
    """
    Position of a page in the page grid.

    Attributes:
        page: Page number (1-indexed)
        x_page: Grid column (1-indexed, grows rightwards)
        y_page: Grid row (1-indexed, grows downwards)
    """

    page: int
    x_page: int
    y_page: int


@dataclass(frozen=True)
class WordBox:
    """
    A word positioned on the page grid.

    ``xmin`` is derived from the right edge of the word's character run and
    ``xmax`` from its left edge, so ``xmin > xmax`` for every word. ``ymax``
    sits one character height below ``ymin``.

    Attributes:
        word: Word text
        line_index: Document-wide index of the source line (1-indexed)
        page: Page number (1-indexed)
        line: Line number within the page (1-indexed)
        xmin: Horizontal edge from the word's right end
        xmax: Horizontal edge from the word's left end
        ymin: Top edge
        ymax: Bottom edge

    Example:
        >>> box = WordBox("cat", 1, 1, 1, xmin=7.0, xmax=4.0, ymin=-4.0, ymax=-7.0)
        >>> box.width
        3.0
    """

    word: str
    line_index: int
    page: int
    line: int
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return abs(self.xmin - self.xmax)

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return abs(self.ymin - self.ymax)


def empty_layout_frame() -> pd.DataFrame:
    """Return a zero-row layout table with the standard columns and dtypes."""
    return pd.DataFrame(
        {name: pd.Series(dtype=_COLUMN_DTYPES[name]) for name in LAYOUT_COLUMNS}
    )


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        words: Positioned words in reading order
        lines: Paginated source lines
        grid: Read-only mapping of page number to GridCell
        max_line_length: Character length of the widest source line
        shape: Detected granularity of the input (None for empty input)

    Example:
        >>> result = layout_book(["the cat sat", "on the mat"], lines_per_page=1)
        >>> result.page_count
        2
        >>> result.to_frame().columns.tolist()
        ['word', 'page', 'line', 'xmin', 'xmax', 'ymin', 'ymax']
    """

    words: Tuple[WordBox, ...]
    lines: Tuple[TextLine, ...] = ()
    grid: Mapping[int, GridCell] = field(default_factory=dict, hash=False)
    max_line_length: int = 0
    shape: Optional[InputShape] = None

    def __post_init__(self) -> None:
        """Freeze the page grid so the result stays immutable."""
        object.__setattr__(self, "grid", MappingProxyType(dict(self.grid)))

    @property
    def page_count(self) -> int:
        """Number of pages in the layout."""
        return len(self.grid)

    @property
    def word_count(self) -> int:
        """Number of positioned words."""
        return len(self.words)

    @property
    def is_empty(self) -> bool:
        """Check if the layout holds no words."""
        return not self.words

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """(rows, cols) actually occupied by pages."""
        if not self.grid:
            return (0, 0)
        rows = max(cell.y_page for cell in self.grid.values())
        cols = max(cell.x_page for cell in self.grid.values())
        return (rows, cols)

    def to_frame(self) -> pd.DataFrame:
        """
        Convert the positioned words into a fresh layout table.

        The returned DataFrame is owned by the caller and may be extended
        with extra columns (e.g. for fill mapping) before rendering.
        """
        if not self.words:
            return empty_layout_frame()

        rows = [
            {
                "word": box.word,
                "page": box.page,
                "line": box.line,
                "xmin": box.xmin,
                "xmax": box.xmax,
                "ymin": box.ymin,
                "ymax": box.ymax,
            }
            for box in self.words
        ]
        df = pd.DataFrame(rows, columns=list(LAYOUT_COLUMNS))
        return df.astype(_COLUMN_DTYPES)
