"""Persistent JSON config helpers.

Stores scroll feel and sequence timeout tuning.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from ..input.sequence import DEFAULT_SEQUENCE_TIMEOUT_MS
from ..scroll.axis import ScrollTuning

APP_NAME = "musophobia"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class NavigatorConfig:
    """Tuning for one navigator instance."""

    tuning: ScrollTuning = field(default_factory=ScrollTuning)
    sequence_timeout_ms: float = DEFAULT_SEQUENCE_TIMEOUT_MS


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _number(data: dict[str, object], key: str, default: float, *, minimum: float, maximum: float | None = None) -> float:
    """Read a numeric value in ``(minimum, maximum]``; fall back to ``default``.

    Booleans are rejected even though they are ``int`` subclasses.
    """
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= minimum:
        return default
    if maximum is not None and value > maximum:
        return default
    return float(value)


def load_navigator_config() -> NavigatorConfig:
    """Build a ``NavigatorConfig`` from disk, validating each value separately."""
    data = load_config()
    defaults = ScrollTuning()
    tuning = ScrollTuning(
        tap_amount=_number(data, "tap_amount", defaults.tap_amount, minimum=0.0),
        hold_velocity=_number(data, "hold_velocity", defaults.hold_velocity, minimum=0.0),
        lerp_factor=_number(data, "lerp_factor", defaults.lerp_factor, minimum=0.0, maximum=1.0),
    )
    timeout = _number(data, "sequence_timeout_ms", DEFAULT_SEQUENCE_TIMEOUT_MS, minimum=0.0)
    return NavigatorConfig(tuning=tuning, sequence_timeout_ms=timeout)


def save_navigator_config(config: NavigatorConfig) -> None:
    """Persist tuning values, preserving unrelated keys already on disk."""
    data = load_config()
    data["tap_amount"] = config.tuning.tap_amount
    data["hold_velocity"] = config.tuning.hold_velocity
    data["lerp_factor"] = config.tuning.lerp_factor
    data["sequence_timeout_ms"] = config.sequence_timeout_ms
    save_config(data)
