"""Help view state and keybinding text.

``HelpView`` only tracks whether the modal is showing and notifies the host
overlay; the host decides how to draw it. ``help_lines`` renders the command
catalogue as terminal text for the CLI.
"""

from __future__ import annotations

from collections.abc import Callable

from ..commands import COMMAND_DEFINITIONS, CommandDefinition, group_commands_by_category

HELP_TITLE = "Keyboard Shortcuts"
TITLE_SGR = "1;38;5;81"
CATEGORY_SGR = "38;5;245"
KEY_SGR = "38;5;229"


class HelpView:
    """Visibility state for the modal help view.

    ``on_change`` is called with the new visibility after every real change,
    never for redundant ``show``/``hide`` calls.
    """

    def __init__(self, on_change: Callable[[bool], None] | None = None) -> None:
        self._on_change = on_change
        self.visible = False

    def _set_visible(self, visible: bool) -> None:
        if self.visible == visible:
            return
        self.visible = visible
        if self._on_change is not None:
            self._on_change(visible)

    def show(self) -> None:
        self._set_visible(True)

    def hide(self) -> None:
        self._set_visible(False)

    def toggle(self) -> None:
        self._set_visible(not self.visible)

    def is_visible(self) -> bool:
        return self.visible


def _sgr(text: str, code: str, color: bool) -> str:
    if not color:
        return text
    return f"\033[{code}m{text}\033[0m"


def help_lines(
    commands: tuple[CommandDefinition, ...] | list[CommandDefinition] = COMMAND_DEFINITIONS,
    color: bool = True,
) -> list[str]:
    """Return help text lines grouped by category, keys padded to one column."""
    key_width = max((len(command.key) for command in commands), default=0)
    lines = [_sgr(HELP_TITLE, TITLE_SGR, color)]
    for category, grouped in group_commands_by_category(commands).items():
        lines.append("")
        lines.append(_sgr(category.upper(), CATEGORY_SGR, color))
        for command in grouped:
            padding = " " * (key_width - len(command.key))
            lines.append(f"  {_sgr(command.key, KEY_SGR, color)}{padding}  {command.description}")
    return lines


def render_help_text(color: bool = True) -> str:
    return "\n".join(help_lines(color=color)) + "\n"
