"""Per-axis smooth scroll model.

Each axis keeps a ``target`` offset that key handling moves around and a
``current`` offset that chases it by a fixed fraction every frame.
Holding a direction key moves the target at constant velocity.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

POSITIVE_HOLD_KEYS = frozenset({"j", "l"})
NEGATIVE_HOLD_KEYS = frozenset({"k", "h"})
VERTICAL_HOLD_KEYS = frozenset({"j", "k"})
HORIZONTAL_HOLD_KEYS = frozenset({"h", "l"})
HOLD_KEYS = VERTICAL_HOLD_KEYS | HORIZONTAL_HOLD_KEYS


def direction_for_key(key: str) -> int:
    """Map a hold key to ``+1``/``-1``; anything else maps to ``0``."""
    if key in POSITIVE_HOLD_KEYS:
        return 1
    if key in NEGATIVE_HOLD_KEYS:
        return -1
    return 0


@dataclass(frozen=True)
class ScrollTuning:
    """Feel constants shared by both axes.

    ``tap_amount`` is the immediate nudge applied on a fresh key press,
    ``hold_velocity`` is units per second while a key stays down, and
    ``lerp_factor`` is the fraction of the remaining distance covered per frame.
    """

    tap_amount: float = 50.0
    hold_velocity: float = 800.0
    lerp_factor: float = 0.2
    epsilon: float = 0.5

    def __post_init__(self) -> None:
        if self.tap_amount < 0:
            raise ValueError("tap_amount must be >= 0")
        if self.hold_velocity <= 0:
            raise ValueError("hold_velocity must be > 0")
        if not 0 < self.lerp_factor <= 1:
            raise ValueError("lerp_factor must be in (0, 1]")
        if self.epsilon <= 0:
            raise ValueError("epsilon must be > 0")


class ScrollAxis:
    """One scrollable dimension bound to a host scroll position.

    ``get_scroll`` reads the live host offset (used once, to seed state) and
    ``scroll_to`` receives the interpolated offset after every tick.
    """

    def __init__(
        self,
        get_scroll: Callable[[], float],
        scroll_to: Callable[[float], None],
        tuning: ScrollTuning | None = None,
    ) -> None:
        self._get_scroll = get_scroll
        self._scroll_to = scroll_to
        self.tuning = tuning if tuning is not None else ScrollTuning()
        self.target = 0.0
        self.current = 0.0
        self.initialized = False
        self.held_direction = 0

    def _ensure_initialized(self) -> None:
        if self.initialized:
            return
        position = float(self._get_scroll())
        self.current = position
        self.target = position
        self.initialized = True

    def hold_start(self, direction: int) -> None:
        """Begin (or continue) holding ``direction``.

        A fresh press or a direction switch nudges the target by one tap so
        short presses are visible even before the first frame lands.
        """
        if direction not in (-1, 1):
            return
        self._ensure_initialized()
        if self.held_direction != direction:
            self.target += direction * self.tuning.tap_amount
        self.held_direction = direction

    def hold_end(self, direction: int) -> None:
        """Release ``direction`` if it is the one currently held."""
        if direction not in (-1, 1):
            return
        if self.held_direction == direction:
            self.held_direction = 0

    def key_down(self, key: str) -> None:
        self.hold_start(direction_for_key(key))

    def key_up(self, key: str) -> None:
        self.hold_end(direction_for_key(key))

    def jump_relative(self, amount: float) -> None:
        """Shift the target by ``amount`` (page-wise jumps)."""
        self._ensure_initialized()
        self.target += amount

    def jump_absolute(self, position: float) -> None:
        """Set the target outright (top/bottom jumps)."""
        self._ensure_initialized()
        self.target = float(position)

    def tick(self, delta_ms: float) -> None:
        """Advance one frame of ``delta_ms`` milliseconds and push to the host."""
        if not self.initialized:
            return
        if self.held_direction != 0:
            self.target += self.held_direction * self.tuning.hold_velocity * (delta_ms / 1000.0)
        self.current += (self.target - self.current) * self.tuning.lerp_factor
        self._scroll_to(self.current)

    def is_converging(self) -> bool:
        return abs(self.target - self.current) > self.tuning.epsilon

    def is_held(self) -> bool:
        return self.held_direction != 0

    def is_active(self) -> bool:
        """Return whether this axis still needs frames."""
        return self.is_held() or self.is_converging()

    def tick_frame(self, delta_ms: float) -> bool:
        """Scheduler callback: tick once and report whether more frames are needed."""
        self.tick(delta_ms)
        return self.is_active()
