"""Input layer: key tables, sequence recognition, and dispatch.

The dispatcher is the only piece host code normally talks to; the lower-level
pieces are exported for composition and tests.
"""

from .dispatcher import DispatcherContext, InputDispatcher
from .key_registry import KeyBinding, KeyCommandTable
from .sequence import DEFAULT_SEQUENCE_TIMEOUT_MS, SequenceRecognizer

__all__ = [
    "DispatcherContext",
    "InputDispatcher",
    "KeyBinding",
    "KeyCommandTable",
    "DEFAULT_SEQUENCE_TIMEOUT_MS",
    "SequenceRecognizer",
]
