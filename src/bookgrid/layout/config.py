"""
Module: layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page capacity, glyph geometry, page spacing and grid shape.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)
    - bookgrid.common.thresholds: Reflow defaults

Used By:
    - layout.composer: Geometry and build_layout()
    - layout.grid: Page-grid dimensions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from bookgrid.common.thresholds import REFLOW_THRESHOLDS


DEFAULT_LINES_PER_PAGE = 25
DEFAULT_CHARACTER_HEIGHT = 3
DEFAULT_VERTICAL_SPACE = 1
DEFAULT_PAGE_SPACING = 10

Tokenizer = Callable[[str], List[str]]


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    All lengths are in layout units, where one unit is the width of a
    single monospace character.

    Attributes:
        lines_per_page: Number of lines allocated to each page
        character_height: Height of a glyph relative to its width
        vertical_space: Gap between consecutive lines
        x_space_pages: Gap between pages along the x-axis
        y_space_pages: Gap between pages along the y-axis
        rows: Number of page rows in the grid (None = derive)
        cols: Number of page columns in the grid (None = derive)
        fill_by_column: Fill the page grid column by column (else row by row)
        wrap_width: Target width when reflowing word streams into lines
        reflow_chunk_size: Words wrapped per batch during reflow
        to_lower: Lowercase words after tokenization
        tokenizer: Callable splitting a line into words (None = whitespace)

    Example:
        >>> config = LayoutConfig(lines_per_page=40, cols=3)
        >>> config.line_pitch
        4
    """

    # Page capacity and glyph geometry
    lines_per_page: int = DEFAULT_LINES_PER_PAGE
    character_height: float = DEFAULT_CHARACTER_HEIGHT
    vertical_space: float = DEFAULT_VERTICAL_SPACE

    # Spacing between pages
    x_space_pages: float = DEFAULT_PAGE_SPACING
    y_space_pages: float = DEFAULT_PAGE_SPACING

    # Grid shape
    rows: Optional[int] = None
    cols: Optional[int] = None
    fill_by_column: bool = True

    # Reflow
    wrap_width: int = REFLOW_THRESHOLDS.wrap_width
    reflow_chunk_size: int = REFLOW_THRESHOLDS.chunk_size

    # Tokenization
    to_lower: bool = False
    tokenizer: Optional[Tokenizer] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.lines_per_page < 1:
            raise ValueError(f"lines_per_page must be at least 1: {self.lines_per_page}")
        if self.character_height <= 0:
            raise ValueError(f"character_height must be positive: {self.character_height}")
        if self.vertical_space < 0:
            raise ValueError(f"vertical_space must not be negative: {self.vertical_space}")
        if self.x_space_pages < 0:
            raise ValueError(f"x_space_pages must not be negative: {self.x_space_pages}")
        if self.y_space_pages < 0:
            raise ValueError(f"y_space_pages must not be negative: {self.y_space_pages}")
        if self.rows is not None and self.rows < 1:
            raise ValueError(f"rows must be at least 1: {self.rows}")
        if self.cols is not None and self.cols < 1:
            raise ValueError(f"cols must be at least 1: {self.cols}")
        if self.wrap_width < 1:
            raise ValueError(f"wrap_width must be at least 1: {self.wrap_width}")
        if self.reflow_chunk_size < 1:
            raise ValueError(f"reflow_chunk_size must be at least 1: {self.reflow_chunk_size}")
        if self.tokenizer is not None and not callable(self.tokenizer):
            raise ValueError(f"tokenizer must be callable: {self.tokenizer!r}")

    @property
    def line_pitch(self) -> float:
        """Vertical distance from one line to the next."""
        return self.character_height + self.vertical_space

    @property
    def page_pitch_y(self) -> float:
        """Vertical distance from one page row to the next."""
        return self.lines_per_page * self.line_pitch + self.y_space_pages
