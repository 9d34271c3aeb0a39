"""
Module: layout.reflow

Purpose:
    Re-wrap a stream of single words into fixed-width lines.
    Only used when the input classifier reports word-granular input.

Key Functions:
    - words_to_lines(): Greedy word-wrap in fixed-size batches

Algorithm:
    1. Split the words into consecutive chunks of ``chunk_size``
    2. Join each chunk's non-blank words with single spaces
    3. Greedily wrap at ``wrap_width``, breaking only at spaces
    4. Concatenate the wrapped lines in chunk order

Dependencies:
    - textwrap (std)
    - bookgrid.common.thresholds: Reflow defaults

Used By:
    - layout.composer: Normalisation stage of layout_book()
"""

from __future__ import annotations

import logging
import textwrap
from typing import Iterator, List, Sequence

from bookgrid.common.thresholds import REFLOW_THRESHOLDS

logger = logging.getLogger(__name__)


def _chunks(words: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Yield consecutive slices of ``words`` holding at most ``size`` items."""
    for start in range(0, len(words), size):
        yield words[start:start + size]


def words_to_lines(
    words: Sequence[str],
    wrap_width: int = REFLOW_THRESHOLDS.wrap_width,
    chunk_size: int = REFLOW_THRESHOLDS.chunk_size,
) -> List[str]:
    """
    Join words into lines no wider than ``wrap_width`` characters.

    Words are never split or hyphenated: a word longer than ``wrap_width``
    ends up alone on an over-width line. Blank records are dropped and
    whitespace inside records is normalised, so
    ``" ".join(result).split()`` equals ``" ".join(words).split()``.

    Args:
        words: Word tokens in reading order
        wrap_width: Target line width in characters
        chunk_size: Words joined and wrapped per batch

    Returns:
        Wrapped lines in reading order

    Raises:
        ValueError: If wrap_width or chunk_size is below 1

    Example:
        >>> words_to_lines(["the", "cat", "sat", "on", "the", "mat"], wrap_width=7)
        ['the cat', 'sat on', 'the mat']
    """
    if wrap_width < 1:
        raise ValueError(f"wrap_width must be at least 1: {wrap_width}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1: {chunk_size}")

    wrapper = textwrap.TextWrapper(
        width=wrap_width,
        break_long_words=False,
        break_on_hyphens=False,
    )

    lines: List[str] = []
    chunk_count = 0
    for chunk in _chunks(words, chunk_size):
        # Blank records and inner whitespace must not leave double spaces
        lines.extend(wrapper.wrap(" ".join(" ".join(chunk).split())))
        chunk_count += 1

    overwide = sum(1 for line in lines if len(line) > wrap_width)
    if overwide:
        logger.warning(
            f"{overwide} reflowed line(s) exceed wrap width {wrap_width} "
            f"because they hold a single longer word"
        )

    logger.debug(f"Reflowed {len(words)} words in {chunk_count} chunk(s) into {len(lines)} lines")
    return lines
