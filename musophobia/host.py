"""Host collaborator contract and an in-memory host.

``NavigatorHost`` bundles every operation the engine needs from the hosting
document. ``SimulatedPage`` and ``ManualFramePacer`` implement it without a
real document so the CLI replay and the tests can drive the whole engine.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .hints.session import HintTarget

FRAME_INTERVAL_MS = 16.0


@dataclass(frozen=True)
class NavigatorHost:
    """Injected host operations.

    Scroll getters/setters are per axis. ``request_frame`` schedules one
    callback with a millisecond timestamp before the next paint.
    ``discover_targets`` returns visible, on-screen hint targets in document
    order.
    """

    get_scroll_y: Callable[[], float]
    scroll_to_y: Callable[[float], None]
    get_scroll_x: Callable[[], float]
    scroll_to_x: Callable[[float], None]
    viewport_height: Callable[[], float]
    document_height: Callable[[], float]
    request_frame: Callable[[Callable[[float], None]], None]
    discover_targets: Callable[[], list[HintTarget]]
    activate: Callable[[object], None]
    focus: Callable[[object], None]
    open_in_new_context: Callable[[str], None]
    blur_active_element: Callable[[], None]


class ManualFramePacer:
    """Frame source that only fires when explicitly pumped."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now_ms = start_ms
        self._pending: list[Callable[[float], None]] = []
        self.frames_run = 0

    def request_frame(self, callback: Callable[[float], None]) -> None:
        self._pending.append(callback)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def clock(self) -> float:
        return self.now_ms

    def run_frame(self, interval_ms: float = FRAME_INTERVAL_MS) -> bool:
        """Advance the clock by ``interval_ms`` and fire queued callbacks.

        Returns ``False`` when nothing was queued.
        """
        self.now_ms += interval_ms
        if not self._pending:
            return False
        pending, self._pending = self._pending, []
        for callback in pending:
            callback(self.now_ms)
        self.frames_run += 1
        return True

    def advance(self, duration_ms: float, interval_ms: float = FRAME_INTERVAL_MS) -> None:
        """Let ``duration_ms`` pass, firing frames every ``interval_ms``."""
        end = self.now_ms + duration_ms
        while self.now_ms + interval_ms <= end:
            self.run_frame(interval_ms)
        self.now_ms = end

    def run_until_idle(self, max_frames: int = 10_000, interval_ms: float = FRAME_INTERVAL_MS) -> int:
        """Pump frames until no callback is queued; return frames run."""
        count = 0
        while self._pending and count < max_frames:
            self.run_frame(interval_ms)
            count += 1
        return count


@dataclass
class SimulatedPage:
    """In-memory document with scroll offsets clamped like a browser window."""

    viewport_width: float = 1280.0
    viewport_height: float = 800.0
    document_width: float = 1280.0
    document_height: float = 4000.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0
    targets: list[HintTarget] = field(default_factory=list)
    activated: list[object] = field(default_factory=list)
    focused: list[object] = field(default_factory=list)
    opened: list[str] = field(default_factory=list)
    blur_count: int = 0

    def _clamp(self, value: float, document: float, viewport: float) -> float:
        return max(0.0, min(float(value), max(0.0, document - viewport)))

    def scroll_to_x(self, value: float) -> None:
        self.scroll_x = self._clamp(value, self.document_width, self.viewport_width)

    def scroll_to_y(self, value: float) -> None:
        self.scroll_y = self._clamp(value, self.document_height, self.viewport_height)

    def blur(self) -> None:
        self.blur_count += 1

    def host(self, pacer: ManualFramePacer) -> NavigatorHost:
        return NavigatorHost(
            get_scroll_y=lambda: self.scroll_y,
            scroll_to_y=self.scroll_to_y,
            get_scroll_x=lambda: self.scroll_x,
            scroll_to_x=self.scroll_to_x,
            viewport_height=lambda: self.viewport_height,
            document_height=lambda: self.document_height,
            request_frame=pacer.request_frame,
            discover_targets=lambda: list(self.targets),
            activate=self.activated.append,
            focus=self.focused.append,
            open_in_new_context=self.opened.append,
            blur_active_element=self.blur,
        )
