"""Key-script replay against a simulated page.

Script format, one command per line; lines starting with ``#`` are comments::

    down j          key-down
    up j            key-up
    press G         key-down immediately followed by key-up
    wait 250        let 250 ms pass, pumping frames every 16 ms
    settle          pump frames until the scheduler goes idle
    targets 8       give the page 8 generic hint targets
    link URL        append one link hint target with destination URL
    input           append one text-entry hint target
    editable on     following key-downs come from an editable element

Key names are taken verbatim (``Escape``, ``Backspace``, ``?``...).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..hints.session import TARGET_GENERIC, TARGET_LINK, TARGET_TEXT_ENTRY, HintTarget
from ..host import ManualFramePacer, SimulatedPage
from .app import Navigator
from .config import NavigatorConfig

logger = logging.getLogger(__name__)


class ReplayScriptError(ValueError):
    """Malformed replay script; ``line_number`` is 1-based."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


@dataclass(frozen=True)
class ReplayStep:
    line_number: int
    command: str
    argument: str = ""


@dataclass
class ReplayResult:
    scroll_x: float
    scroll_y: float
    target_x: float
    target_y: float
    frames_run: int
    help_visible: bool
    hints_active: bool
    visible_labels: list[str] = field(default_factory=list)
    activated: list[object] = field(default_factory=list)
    focused: list[object] = field(default_factory=list)
    opened: list[str] = field(default_factory=list)
    blur_count: int = 0

    def summary_lines(self) -> list[str]:
        lines = [
            f"scroll: x={self.scroll_x:.1f} y={self.scroll_y:.1f}",
            f"target: x={self.target_x:.1f} y={self.target_y:.1f}",
            f"frames: {self.frames_run}",
            f"help: {'visible' if self.help_visible else 'hidden'}",
        ]
        if self.hints_active:
            lines.append(f"hints: {' '.join(self.visible_labels)}")
        if self.activated:
            lines.append(f"activated: {', '.join(str(handle) for handle in self.activated)}")
        if self.focused:
            lines.append(f"focused: {', '.join(str(handle) for handle in self.focused)}")
        if self.opened:
            lines.append(f"opened: {', '.join(self.opened)}")
        if self.blur_count:
            lines.append(f"blurred: {self.blur_count}")
        return lines


_ARGUMENT_COMMANDS = {"down", "up", "press", "wait", "targets", "link", "editable"}
_BARE_COMMANDS = {"settle", "input"}


def parse_script(text: str) -> list[ReplayStep]:
    """Parse replay script text into steps, validating arguments."""
    steps: list[ReplayStep] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        command, _sep, argument = line.partition(" ")
        argument = argument.strip()
        if command in _BARE_COMMANDS:
            if argument:
                raise ReplayScriptError(line_number, f"{command!r} takes no argument")
        elif command in _ARGUMENT_COMMANDS:
            if not argument:
                raise ReplayScriptError(line_number, f"{command!r} needs an argument")
        else:
            raise ReplayScriptError(line_number, f"unknown command {command!r}")

        if command in {"wait", "targets"}:
            try:
                value = float(argument) if command == "wait" else int(argument)
            except ValueError as exc:
                raise ReplayScriptError(line_number, f"invalid number {argument!r}") from exc
            if value < 0:
                raise ReplayScriptError(line_number, "value must be >= 0")
        if command == "editable" and argument not in {"on", "off"}:
            raise ReplayScriptError(line_number, "editable expects 'on' or 'off'")

        steps.append(ReplayStep(line_number, command, argument))
    return steps


def run_script(
    steps: list[ReplayStep],
    config: NavigatorConfig | None = None,
    page: SimulatedPage | None = None,
) -> ReplayResult:
    """Execute parsed steps against ``page`` and return the final state."""
    page = page if page is not None else SimulatedPage()
    pacer = ManualFramePacer()
    navigator = Navigator(page.host(pacer), config, clock=pacer.clock)
    editable = False

    for step in steps:
        logger.debug("replay line %d: %s %s", step.line_number, step.command, step.argument)
        if step.command == "down":
            navigator.handle_key_down(step.argument, editable)
        elif step.command == "up":
            navigator.handle_key_up(step.argument)
        elif step.command == "press":
            navigator.handle_key_down(step.argument, editable)
            navigator.handle_key_up(step.argument)
        elif step.command == "wait":
            pacer.advance(float(step.argument))
        elif step.command == "settle":
            pacer.run_until_idle()
        elif step.command == "targets":
            base = len(page.targets)
            page.targets.extend(
                [HintTarget(handle=f"target-{base + index}", kind=TARGET_GENERIC) for index in range(int(step.argument))]
            )
        elif step.command == "link":
            page.targets.append(
                HintTarget(handle=f"link-{len(page.targets)}", kind=TARGET_LINK, destination=step.argument)
            )
        elif step.command == "input":
            page.targets.append(HintTarget(handle=f"input-{len(page.targets)}", kind=TARGET_TEXT_ENTRY))
        elif step.command == "editable":
            editable = step.argument == "on"

    return ReplayResult(
        scroll_x=page.scroll_x,
        scroll_y=page.scroll_y,
        target_x=navigator.horizontal.target,
        target_y=navigator.vertical.target,
        frames_run=pacer.frames_run,
        help_visible=navigator.help_view.is_visible(),
        hints_active=navigator.hints.active,
        visible_labels=navigator.hints.visible_labels(),
        activated=list(page.activated),
        focused=list(page.focused),
        opened=list(page.opened),
        blur_count=page.blur_count,
    )
