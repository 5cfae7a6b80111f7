"""Smooth scroll axis model."""

from .axis import (
    HOLD_KEYS,
    HORIZONTAL_HOLD_KEYS,
    VERTICAL_HOLD_KEYS,
    ScrollAxis,
    ScrollTuning,
    direction_for_key,
)

__all__ = [
    "HOLD_KEYS",
    "HORIZONTAL_HOLD_KEYS",
    "VERTICAL_HOLD_KEYS",
    "ScrollAxis",
    "ScrollTuning",
    "direction_for_key",
]
