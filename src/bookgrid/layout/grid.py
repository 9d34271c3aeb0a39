"""
Module: layout.grid

Purpose:
    Tile pages into a two-dimensional grid of rows and columns.

Key Functions:
    - grid_dimensions(): Resolve (rows, cols) for a page count
    - page_grid(): Map every page number to its GridCell

Algorithm:
    Neither rows nor cols given -> square grid of ceil(sqrt(n)) per side.
    One given -> the other is ceil(n / given).
    Column-major fills one full column of ``rows`` pages before moving right;
    row-major fills one full row of ``cols`` pages before moving down.

Dependencies:
    - math (std)
    - layout.models: GridCell

Used By:
    - layout.composer: Global page placement
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Tuple

from .models import GridCell

logger = logging.getLogger(__name__)


def grid_dimensions(
    num_pages: int,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Resolve the grid shape that holds ``num_pages`` pages.

    When both ``rows`` and ``cols`` are given they are kept if they provide
    enough cells; otherwise ``rows`` wins and ``cols`` is re-derived.

    Args:
        num_pages: Number of pages to place (must be positive)
        rows: Requested number of page rows
        cols: Requested number of page columns

    Returns:
        (rows, cols) with rows * cols >= num_pages

    Raises:
        ValueError: If num_pages, rows or cols is below 1

    Example:
        >>> grid_dimensions(10)
        (4, 4)
        >>> grid_dimensions(10, cols=3)
        (4, 3)
    """
    if num_pages < 1:
        raise ValueError(f"num_pages must be at least 1: {num_pages}")
    if rows is not None and rows < 1:
        raise ValueError(f"rows must be at least 1: {rows}")
    if cols is not None and cols < 1:
        raise ValueError(f"cols must be at least 1: {cols}")

    if rows is not None and cols is not None:
        if rows * cols >= num_pages:
            return rows, cols
        logger.warning(
            f"Grid of {rows} x {cols} cannot hold {num_pages} pages; "
            f"keeping {rows} rows and widening"
        )
        return rows, math.ceil(num_pages / rows)
    if rows is not None:
        return rows, math.ceil(num_pages / rows)
    if cols is not None:
        return math.ceil(num_pages / cols), cols

    side = math.ceil(math.sqrt(num_pages))
    return side, side


def page_grid(
    num_pages: int,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    fill_by_column: bool = True,
) -> Dict[int, GridCell]:
    """
    Assign each page 1..num_pages a distinct cell in the page grid.

    Args:
        num_pages: Number of pages to place (must be positive)
        rows: Requested number of page rows
        cols: Requested number of page columns
        fill_by_column: Column-major fill if True, else row-major

    Returns:
        Dict of page number -> GridCell (1-indexed x_page/y_page)

    Example:
        >>> cells = page_grid(3, rows=2)
        >>> [(c.x_page, c.y_page) for c in cells.values()]
        [(1, 1), (1, 2), (2, 1)]
    """
    n_rows, n_cols = grid_dimensions(num_pages, rows, cols)

    cells: Dict[int, GridCell] = {}
    for page in range(1, num_pages + 1):
        if fill_by_column:
            major, minor = divmod(page - 1, n_rows)
            cells[page] = GridCell(page=page, x_page=major + 1, y_page=minor + 1)
        else:
            major, minor = divmod(page - 1, n_cols)
            cells[page] = GridCell(page=page, x_page=minor + 1, y_page=major + 1)

    logger.debug(
        f"Placed {num_pages} pages on a {n_rows} x {n_cols} grid "
        f"({'column' if fill_by_column else 'row'}-major)"
    )
    return cells
