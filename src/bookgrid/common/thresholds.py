"""Centralized threshold and magic number configuration.

This module contains the hardcoded heuristics used when turning raw text
into page layouts. They are tunable constants, not laws of nature, so they
live here rather than inline in the layout code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InputShapeThresholds:
    """Thresholds for deciding whether input records are lines or words."""

    sample_size: int = 25  # Leading records inspected for spaces
    line_fraction: float = 0.9  # Share of sampled records with a space needed for "lines"


@dataclass(frozen=True)
class ReflowThresholds:
    """Defaults for re-wrapping word streams into lines."""

    wrap_width: int = 80  # Target line width in characters
    chunk_size: int = 1000  # Words joined and wrapped per batch


# Global instances for easy import
INPUT_SHAPE_THRESHOLDS = InputShapeThresholds()
REFLOW_THRESHOLDS = ReflowThresholds()
