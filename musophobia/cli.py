"""Command-line front door for musophobia.

Prints the keybinding help or replays a key script against a simulated page,
using tuning loaded from the user config and overridden by flags.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .render.help import render_help_text
from .runtime.config import NavigatorConfig, load_navigator_config, save_navigator_config
from .runtime.replay import ReplayScriptError, parse_script, run_script


def _positive_float(value: str) -> float:
    """argparse type for strictly positive float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def _lerp_factor(value: str) -> float:
    parsed = _positive_float(value)
    if parsed > 1:
        raise argparse.ArgumentTypeError("value must be <= 1")
    return parsed


def _apply_overrides(config: NavigatorConfig, args: argparse.Namespace) -> NavigatorConfig:
    """Return ``config`` with any tuning flags given on the command line applied."""
    tuning = config.tuning
    if args.tap_amount is not None:
        tuning = replace(tuning, tap_amount=args.tap_amount)
    if args.hold_velocity is not None:
        tuning = replace(tuning, hold_velocity=args.hold_velocity)
    if args.lerp_factor is not None:
        tuning = replace(tuning, lerp_factor=args.lerp_factor)
    timeout = config.sequence_timeout_ms if args.sequence_timeout is None else args.sequence_timeout
    return NavigatorConfig(tuning=tuning, sequence_timeout_ms=timeout)


def main() -> None:
    """Parse CLI arguments and print help text or a replay summary."""
    parser = argparse.ArgumentParser(
        description="Keyboard navigation engine: list keybindings or replay a key script."
    )
    parser.add_argument("--keys", action="store_true", help="Print keybinding help and exit.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in help output.")
    parser.add_argument("--replay", metavar="SCRIPT", help="Replay a key script against a simulated page.")
    parser.add_argument("--tap-amount", type=_positive_float, default=None, help="Scroll distance of one tap.")
    parser.add_argument("--hold-velocity", type=_positive_float, default=None, help="Held-key scroll speed per second.")
    parser.add_argument("--lerp-factor", type=_lerp_factor, default=None, help="Per-frame interpolation factor (0, 1].")
    parser.add_argument("--sequence-timeout", type=_positive_float, default=None, help="Multi-key timeout in ms.")
    parser.add_argument("--save-config", action="store_true", help="Persist the effective tuning to the user config.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = _apply_overrides(load_navigator_config(), args)
    if args.save_config:
        save_navigator_config(config)

    if args.keys:
        sys.stdout.write(render_help_text(color=not args.no_color and sys.stdout.isatty()))
        return

    if args.replay is None:
        if not args.save_config:
            parser.print_help()
        return

    script_path = Path(args.replay)
    if not script_path.is_file():
        raise SystemExit(f"Script not found: {script_path}")
    try:
        steps = parse_script(script_path.read_text(encoding="utf-8"))
    except ReplayScriptError as exc:
        raise SystemExit(f"{script_path}: {exc}") from exc

    result = run_script(steps, config)
    sys.stdout.write("\n".join(result.summary_lines()) + "\n")


if __name__ == "__main__":
    main()
