"""
Module: bookgrid.layout

Purpose:
    Page layout for arbitrary text.
    Converts lines or words into positioned word rectangles tiled on a
    grid of pages, ready for a 2D plotting library to draw.

Key Functions:
    - build_layout(): Main entry point returning a DataFrame
    - layout_book(): Main entry point returning a LayoutResult
    - words_to_lines(): Reflow word streams into lines
    - paginate_lines(): Arrange lines onto pages
    - page_grid(): Place pages on the grid

Key Classes:
    - LayoutConfig: Configuration for page layout
    - WordBox: Positioned word
    - LayoutResult: Complete layout

Dependencies:
    - numpy: Line offsets
    - pandas: Table input and output

Used By:
    - Plotting helpers drawing one rectangle per word
"""

from .config import LayoutConfig
from .models import (
    InputShape,
    TextLine,
    GridCell,
    WordBox,
    LayoutResult,
    LAYOUT_COLUMNS,
    empty_layout_frame,
)
from .classifier import InvalidInputError, normalize_input, classify_input
from .reflow import words_to_lines
from .paginator import paginate_lines
from .grid import grid_dimensions, page_grid
from .composer import (
    tokenize_line,
    line_offsets,
    layout_lines,
    layout_book,
    build_layout,
)

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "InputShape",
    "TextLine",
    "GridCell",
    "WordBox",
    "LayoutResult",
    "LAYOUT_COLUMNS",
    "empty_layout_frame",
    # Errors
    "InvalidInputError",
    # Functions
    "normalize_input",
    "classify_input",
    "words_to_lines",
    "paginate_lines",
    "grid_dimensions",
    "page_grid",
    "tokenize_line",
    "line_offsets",
    "layout_lines",
    "layout_book",
    "build_layout",
]
