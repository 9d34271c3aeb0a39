"""
Module: layout.classifier

Purpose:
    Normalise raw input into a list of strings and decide whether the
    records are whole lines or single words.

Key Functions:
    - normalize_input(): Coerce supported inputs to a list of strings
    - classify_input(): Detect line- vs word-granular input

Key Classes:
    - InvalidInputError: Input is neither text nor a table with text

Dependencies:
    - numpy, pandas: Array and table inputs
    - bookgrid.common.thresholds: Sampling heuristic

Used By:
    - layout.composer: First stage of layout_book()
"""

from __future__ import annotations

import logging
from typing import Any, List

import numpy as np
import pandas as pd

from bookgrid.common.thresholds import INPUT_SHAPE_THRESHOLDS, InputShapeThresholds

from .models import InputShape

logger = logging.getLogger(__name__)

TEXT_COLUMN = "text"


class InvalidInputError(TypeError):
    """Input is neither a text collection nor a table with a text column."""
    pass


def _coerce_text(value: Any) -> str:
    """Return one record as a string; missing values become empty strings."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    # pd.isna is elementwise on containers; only trust it for scalars
    if np.ndim(value) == 0 and pd.isna(value):
        return ""
    raise InvalidInputError(
        f"Records must be text, got {type(value).__name__}: {value!r}"
    )


def normalize_input(book: Any) -> List[str]:
    """
    Convert supported input shapes into an ordered list of strings.

    Accepted inputs:
    - a single ``str`` (one record)
    - ``list``/``tuple``/``numpy.ndarray``/``pandas.Series`` of strings
    - ``pandas.DataFrame`` with a ``text`` column

    Missing values (None, NaN, pd.NA) are treated as empty strings so the
    transform stays total over its input domain. Any other non-string
    record (numbers, booleans) is rejected.

    Args:
        book: Raw input

    Returns:
        List of record texts in input order

    Raises:
        InvalidInputError: If the input type is unsupported, a record is
            not text, or a table lacks a single ``text`` column

    Example:
        >>> normalize_input(pd.DataFrame({"text": ["a b", None]}))
        ['a b', '']
    """
    if isinstance(book, str):
        return [book]

    if isinstance(book, pd.DataFrame):
        if TEXT_COLUMN not in book.columns:
            raise InvalidInputError(
                f"Table input needs a '{TEXT_COLUMN}' column, got: {list(book.columns)}"
            )
        if book.columns.tolist().count(TEXT_COLUMN) != 1:
            raise InvalidInputError(f"Table input has more than one '{TEXT_COLUMN}' column")
        values = book[TEXT_COLUMN].tolist()
    elif isinstance(book, pd.Series):
        values = book.tolist()
    elif isinstance(book, np.ndarray):
        if book.ndim != 1:
            raise InvalidInputError(f"Array input must be one-dimensional, got shape {book.shape}")
        values = book.tolist()
    elif isinstance(book, (list, tuple)):
        values = list(book)
    else:
        raise InvalidInputError(
            f"Please supply a text collection or a table with a '{TEXT_COLUMN}' column, "
            f"got {type(book).__name__}"
        )

    return [_coerce_text(value) for value in values]


def classify_input(
    texts: List[str],
    thresholds: InputShapeThresholds = INPUT_SHAPE_THRESHOLDS,
) -> InputShape:
    """
    Decide whether records are whole lines or single words.

    Samples the leading ``sample_size`` records and measures the share that
    contain a space. Prose lines almost always do; word tokens mostly do not.

    Args:
        texts: Normalised record texts
        thresholds: Sampling heuristic

    Returns:
        InputShape.LINES if the share reaches ``line_fraction``,
        otherwise InputShape.WORDS (including for an empty sample)

    Example:
        >>> classify_input(["the", "cat", "sat"])
        <InputShape.WORDS: 'words'>
    """
    sample = texts[:thresholds.sample_size]
    if not sample:
        return InputShape.WORDS

    with_space = sum(1 for text in sample if " " in text)
    fraction = with_space / len(sample)
    shape = InputShape.LINES if fraction >= thresholds.line_fraction else InputShape.WORDS

    logger.debug(
        f"Classified input as {shape.value}: {with_space}/{len(sample)} "
        f"sampled records contain a space"
    )
    return shape
