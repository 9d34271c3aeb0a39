"""Common utilities shared across bookgrid."""

from __future__ import annotations

from .thresholds import (
    InputShapeThresholds,
    ReflowThresholds,
    INPUT_SHAPE_THRESHOLDS,
    REFLOW_THRESHOLDS,
)

__all__ = [
    "InputShapeThresholds",
    "ReflowThresholds",
    "INPUT_SHAPE_THRESHOLDS",
    "REFLOW_THRESHOLDS",
]
