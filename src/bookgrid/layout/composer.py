"""
Module: layout.composer

Purpose:
    Compose positioned words from raw text.
    Runs the full pipeline and computes per-word bounding boxes.

Pipeline:
    Normalise -> Classify -> (Reflow) -> Paginate -> Tokenize
    -> Line offsets -> Page grid -> Geometry

Key Functions:
    - tokenize_line(): Split a line into words
    - line_offsets(): Left/right character offsets for words on one line
    - layout_lines(): Geometry for already line-granular text
    - layout_book(): Main entry point returning a LayoutResult
    - build_layout(): Main entry point returning a DataFrame

Dependencies:
    - numpy: Cumulative offsets along a line
    - pandas: Output table
    - layout.classifier, layout.reflow, layout.paginator, layout.grid

Used By:
    - Renderers consuming the word/page/line/x/y table
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .classifier import classify_input, normalize_input
from .config import LayoutConfig
from .grid import page_grid
from .models import InputShape, LayoutResult, WordBox
from .paginator import paginate_lines
from .reflow import words_to_lines

logger = logging.getLogger(__name__)


def tokenize_line(text: str, config: LayoutConfig) -> List[str]:
    """
    Split a line into words.

    Uses ``config.tokenizer`` when set, otherwise whitespace splitting
    (punctuation stays attached to its word). Empty tokens are dropped.
    """
    words = config.tokenizer(text) if config.tokenizer is not None else text.split()
    if config.to_lower:
        words = [word.lower() for word in words]
    return [word for word in words if word]


def line_offsets(words: Sequence[str]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute character offsets of each word within its line.

    Each word occupies its length plus one trailing space. The left offset
    is the running total before the word (0 for the first word); the right
    offset is the running total including the word, minus the trailing space.

    Args:
        words: Words of one line in order

    Returns:
        (left, right) integer arrays, one entry per word

    Example:
        >>> left, right = line_offsets(["the", "cat"])
        >>> left.tolist(), right.tolist()
        ([0, 4], [3, 7])
    """
    widths = np.fromiter((len(word) + 1 for word in words), dtype=np.int64, count=len(words))
    running = np.cumsum(widths)
    return running - widths, running - 1


def layout_lines(lines: Sequence[str], config: LayoutConfig) -> LayoutResult:
    """
    Position every word of line-granular text on the page grid.

    The widest source line sets the horizontal extent of every page, so
    pages align in the grid regardless of their own content.

    Args:
        lines: Line texts in reading order
        config: Layout configuration

    Returns:
        LayoutResult (empty when there are no lines)
    """
    if not lines:
        return LayoutResult(words=())

    text_lines = paginate_lines(lines, config.lines_per_page)
    num_pages = text_lines[-1].page
    grid = page_grid(num_pages, config.rows, config.cols, config.fill_by_column)
    max_line_length = max(len(text) for text in lines)

    page_pitch_x = max_line_length + config.x_space_pages
    line_pitch = config.line_pitch
    page_pitch_y = config.page_pitch_y

    boxes: List[WordBox] = []
    for text_line in text_lines:
        words = tokenize_line(text_line.text, config)
        if not words:
            continue

        cell = grid[text_line.page]
        left, right = line_offsets(words)
        x_origin = cell.x_page * page_pitch_x
        ymin = -text_line.line * line_pitch - cell.y_page * page_pitch_y
        ymax = ymin - config.character_height

        for word, x_left, x_right in zip(words, left.tolist(), right.tolist()):
            boxes.append(WordBox(
                word=word,
                line_index=text_line.index,
                page=text_line.page,
                line=text_line.line,
                xmin=float(x_right + x_origin),
                xmax=float(x_left + x_origin),
                ymin=float(ymin),
                ymax=float(ymax),
            ))

    result = LayoutResult(
        words=tuple(boxes),
        lines=text_lines,
        grid=grid,
        max_line_length=max_line_length,
    )
    n_rows, n_cols = result.grid_shape
    logger.info(
        f"Laid out {result.word_count} words over {num_pages} pages "
        f"({n_rows} x {n_cols} grid)"
    )
    return result


def _resolve_config(config: Optional[LayoutConfig], overrides: dict) -> LayoutConfig:
    """Merge keyword overrides into a (validated) configuration."""
    base = config if config is not None else LayoutConfig()
    if not overrides:
        return base
    return dataclasses.replace(base, **overrides)


def layout_book(
    book: Any,
    config: Optional[LayoutConfig] = None,
    **overrides: Any,
) -> LayoutResult:
    """
    Lay out a book of lines or words onto a grid of pages.

    Args:
        book: Text collection (str, list, tuple, ndarray, Series) or a
            DataFrame with a ``text`` column; records may be lines or words
        config: Layout configuration (defaults to LayoutConfig())
        **overrides: LayoutConfig fields replacing those of ``config``

    Returns:
        LayoutResult with positioned words, lines and page grid

    Raises:
        InvalidInputError: If ``book`` is not a supported input
        ValueError: If an override is invalid

    Example:
        >>> result = layout_book(["the cat sat", "on the mat"], lines_per_page=1)
        >>> result.page_count, result.word_count
        (2, 6)
    """
    config = _resolve_config(config, overrides)
    texts = normalize_input(book)
    if not texts:
        logger.debug("Empty input; returning empty layout")
        return LayoutResult(words=())

    shape = classify_input(texts)
    if shape is InputShape.WORDS:
        lines = words_to_lines(texts, config.wrap_width, config.reflow_chunk_size)
    else:
        lines = texts

    result = layout_lines(lines, config)
    return dataclasses.replace(result, shape=shape)


def build_layout(
    book: Any,
    config: Optional[LayoutConfig] = None,
    **overrides: Any,
) -> pd.DataFrame:
    """
    Build the word layout table for a book.

    Columns: ``word, page, line, xmin, xmax, ymin, ymax``, one row per word
    in reading order. Empty input yields an empty table with the same
    columns.

    Example:
        >>> df = build_layout(["the cat sat", "on the mat"], lines_per_page=1)
        >>> df["page"].tolist()
        [1, 1, 1, 2, 2, 2]
    """
    return layout_book(book, config, **overrides).to_frame()
