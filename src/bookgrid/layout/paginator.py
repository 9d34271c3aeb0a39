"""
Module: layout.paginator

Purpose:
    Arrange source lines onto fixed-capacity pages.
    Every page holds ``lines_per_page`` consecutive lines; the last page
    may be partially filled.

Key Functions:
    - paginate_lines(): Assign page and in-page line numbers

Dependencies:
    - layout.models: TextLine

Used By:
    - layout.composer: Pagination stage of layout_book()
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .models import TextLine

logger = logging.getLogger(__name__)


def paginate_lines(lines: Sequence[str], lines_per_page: int) -> Tuple[TextLine, ...]:
    """
    Assign each line a page number and a line number within that page.

    Lines keep their original order. Page ``k`` holds lines
    ``(k - 1) * lines_per_page + 1`` through ``k * lines_per_page``.

    Args:
        lines: Line texts in reading order
        lines_per_page: Page capacity in lines

    Returns:
        Tuple of TextLines, one per input line

    Raises:
        ValueError: If lines_per_page is below 1

    Example:
        >>> [(t.page, t.line) for t in paginate_lines(["a", "b", "c"], 2)]
        [(1, 1), (1, 2), (2, 1)]
    """
    if lines_per_page < 1:
        raise ValueError(f"lines_per_page must be at least 1: {lines_per_page}")

    paginated: List[TextLine] = []
    for i, text in enumerate(lines):
        page, offset = divmod(i, lines_per_page)
        paginated.append(TextLine(index=i + 1, page=page + 1, line=offset + 1, text=text))

    if paginated:
        logger.debug(f"Paginated {len(paginated)} lines onto {paginated[-1].page} pages")
    return tuple(paginated)
