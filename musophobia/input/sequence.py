"""Multi-key sequence recognizer with a rolling timeout."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE_TIMEOUT_MS = 500.0


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SequenceRecognizer:
    """Match buffered keystrokes against registered sequence strings.

    A buffer that is a strict prefix of some sequence keeps accumulating; an
    exact match fires immediately, with no lookahead for longer sequences.
    Buffered keys older than ``timeout_ms`` are discarded before the next key
    is appended.
    """

    def __init__(
        self,
        timeout_ms: float = DEFAULT_SEQUENCE_TIMEOUT_MS,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self.timeout_ms = timeout_ms
        self._clock = clock
        self._sequences: dict[str, Callable[[], None]] = {}
        self.buffer = ""
        self._last_key_time: float | None = None

    def register(self, sequence: str, action: Callable[[], None]) -> None:
        """Bind ``sequence`` to ``action``, replacing any earlier binding."""
        if not sequence:
            raise ValueError("sequence must be non-empty")
        self._sequences[sequence] = action

    def sequences(self) -> list[str]:
        return list(self._sequences)

    def reset(self) -> None:
        self.buffer = ""

    def handle_key(self, key: str) -> bool:
        """Feed one key and return ``True`` when it was consumed."""
        now = self._clock()
        if self._last_key_time is not None and now - self._last_key_time > self.timeout_ms:
            if self.buffer:
                logger.debug("sequence buffer %r expired", self.buffer)
            self.buffer = ""

        self.buffer += key
        self._last_key_time = now

        action = self._sequences.get(self.buffer)
        if action is not None:
            logger.debug("sequence %r matched", self.buffer)
            self.buffer = ""
            action()
            return True

        if any(sequence.startswith(self.buffer) for sequence in self._sequences):
            return True

        self.buffer = ""
        return False
