"""Hint labels and hint sessions."""

from .labels import HINT_ALPHABET, HintCapacityError, generate_hint_labels, hint_capacity
from .session import (
    TARGET_GENERIC,
    TARGET_LINK,
    TARGET_TEXT_ENTRY,
    ElementOperations,
    HintSession,
    HintTarget,
)

__all__ = [
    "HINT_ALPHABET",
    "HintCapacityError",
    "generate_hint_labels",
    "hint_capacity",
    "TARGET_GENERIC",
    "TARGET_LINK",
    "TARGET_TEXT_ENTRY",
    "ElementOperations",
    "HintSession",
    "HintTarget",
]
