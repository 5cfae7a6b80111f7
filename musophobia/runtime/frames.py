"""Cooperative per-frame scheduler.

Callbacks are level-triggered: each frame every registered callback runs and
returns whether it still needs frames. The scheduler keeps requesting frames
from the host only while at least one of them says so.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], bool]
RequestFrame = Callable[[Callable[[float], None]], None]

FIRST_FRAME_DELTA_MS = 16.0


class FrameScheduler:
    """Drive registered frame callbacks through a host frame-pacing primitive.

    ``request_frame`` must invoke its argument once, later, with a timestamp in
    milliseconds. There is no cancel handle: the loop ends on the first frame
    where no callback reports activity.
    """

    def __init__(self, request_frame: RequestFrame) -> None:
        self._request_frame = request_frame
        self._callbacks: list[FrameCallback] = []
        self._running = False
        self._last_time: float | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    def register(self, callback: FrameCallback) -> None:
        self._callbacks.append(callback)

    def start(self) -> None:
        """Begin ticking unless a run is already in flight."""
        if self._running:
            return
        self._running = True
        self._last_time = None
        logger.debug("frame scheduler started")
        self._request_frame(self._tick)

    def _tick(self, timestamp_ms: float) -> None:
        if self._last_time is None:
            delta_ms = FIRST_FRAME_DELTA_MS
        else:
            delta_ms = timestamp_ms - self._last_time
        self._last_time = timestamp_ms

        # Every callback must tick, so no any()-style short-circuit here.
        try:
            results = [callback(delta_ms) for callback in self._callbacks]
        except BaseException:
            self._running = False
            self._last_time = None
            raise
        if any(results):
            self._request_frame(self._tick)
            return

        self._running = False
        self._last_time = None
        logger.debug("frame scheduler stopped")
