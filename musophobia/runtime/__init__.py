"""Runtime composition: frame scheduling, config, navigator wiring, replay.

``Navigator`` is imported lazily so the low-level modules here can be used
by the input layer without an import cycle.
"""

from __future__ import annotations

from .frames import FIRST_FRAME_DELTA_MS, FrameScheduler


def __getattr__(name: str):
    if name == "Navigator":
        from .app import Navigator

        return Navigator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "FIRST_FRAME_DELTA_MS",
    "FrameScheduler",
    "Navigator",
]
