"""Hint session: label assignment, incremental matching, and activation.

One session lives from ``open`` until a label is completed, the typed prefix
dead-ends, or the user escapes. The overlay collaborator reads
``visible_labels`` after each keystroke; this module never touches markup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .labels import HINT_ALPHABET, generate_hint_labels, hint_capacity

logger = logging.getLogger(__name__)

TARGET_TEXT_ENTRY = "text_entry"
TARGET_LINK = "link"
TARGET_GENERIC = "generic"


@dataclass(frozen=True)
class HintTarget:
    """One discovered element eligible for hinting.

    ``handle`` is opaque to the engine and passed back to element operations.
    ``destination`` is only meaningful for link targets.
    """

    handle: object
    kind: str = TARGET_GENERIC
    destination: str | None = None


@dataclass(frozen=True)
class ElementOperations:
    """Host primitives used to act on a resolved hint target."""

    activate: Callable[[object], None]
    focus: Callable[[object], None]
    open_in_new_context: Callable[[str], None]


class HintSession:
    """Owns the label -> target assignment for at most one active session."""

    def __init__(self, operations: ElementOperations, alphabet: str = HINT_ALPHABET) -> None:
        self._operations = operations
        self.alphabet = alphabet
        self._label_chars = frozenset(alphabet)
        self.assignment: list[tuple[str, HintTarget]] = []
        self._targets_by_label: dict[str, HintTarget] = {}
        self.typed_prefix = ""
        self.active = False
        self.new_tab_requested = False

    def open(self, targets: list[HintTarget], new_tab: bool = False) -> bool:
        """Label ``targets`` and start matching.

        Returns ``False`` without changing anything when ``targets`` is empty
        or when a session is already active (second opens are rejected).
        Targets past the two-character capacity are left unlabelled.
        """
        if self.active:
            logger.debug("hint session already active; open rejected")
            return False
        if not targets:
            return False

        capacity = hint_capacity(self.alphabet)
        if len(targets) > capacity:
            logger.warning(
                "%d hint targets exceed label capacity %d; labelling the first %d",
                len(targets),
                capacity,
                capacity,
            )
            targets = targets[:capacity]

        labels = generate_hint_labels(len(targets), self.alphabet)
        self.assignment = list(zip(labels, targets))
        self._targets_by_label = dict(self.assignment)
        self.typed_prefix = ""
        self.new_tab_requested = new_tab
        self.active = True
        logger.debug("hint session opened with %d targets (new_tab=%s)", len(targets), new_tab)
        return True

    def close(self) -> None:
        if not self.active and not self.assignment:
            return
        self.active = False
        self.new_tab_requested = False
        self.typed_prefix = ""
        self.assignment = []
        self._targets_by_label = {}
        logger.debug("hint session closed")

    def labels(self) -> list[str]:
        return [label for label, _target in self.assignment]

    def visible_labels(self) -> list[str]:
        """Labels still reachable from the typed prefix, in assignment order."""
        return [label for label, _target in self.assignment if label.startswith(self.typed_prefix)]

    def consume_key(self, key: str) -> bool:
        """Feed one key and return ``True`` when the session consumed it."""
        if not self.active:
            return False

        if key == "Escape":
            self.close()
            return True

        if key == "Backspace":
            if self.typed_prefix:
                self.typed_prefix = self.typed_prefix[:-1]
            return True

        folded = key.lower()
        if len(folded) != 1 or folded not in self._label_chars:
            return False

        self.typed_prefix += folded

        target = self._targets_by_label.get(self.typed_prefix)
        if target is not None:
            self._activate(target, self.new_tab_requested)
            self.close()
            return True

        if not self.visible_labels():
            logger.debug("hint prefix %r matches nothing", self.typed_prefix)
            self.close()
        return True

    def _activate(self, target: HintTarget, new_tab: bool) -> None:
        if target.kind == TARGET_TEXT_ENTRY:
            self._operations.focus(target.handle)
            return
        if new_tab and target.kind == TARGET_LINK and target.destination:
            self._operations.open_in_new_context(target.destination)
            return
        self._operations.activate(target.handle)
