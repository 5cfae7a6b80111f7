"""User-facing command catalogue shown by the help view."""

from __future__ import annotations

from dataclasses import dataclass

CATEGORY_NAVIGATION = "Navigation"
CATEGORY_LINKS = "Links"
CATEGORY_HELP = "Help"

HELP_TOGGLE_KEY = "?"
HINT_KEY = "f"
HINT_NEW_TAB_KEY = "F"


@dataclass(frozen=True)
class CommandDefinition:
    key: str
    description: str
    category: str


COMMAND_DEFINITIONS: tuple[CommandDefinition, ...] = (
    CommandDefinition("j", "Scroll down", CATEGORY_NAVIGATION),
    CommandDefinition("k", "Scroll up", CATEGORY_NAVIGATION),
    CommandDefinition("h", "Scroll left", CATEGORY_NAVIGATION),
    CommandDefinition("l", "Scroll right", CATEGORY_NAVIGATION),
    CommandDefinition("d", "Half page down", CATEGORY_NAVIGATION),
    CommandDefinition("u", "Half page up", CATEGORY_NAVIGATION),
    CommandDefinition("gg", "Go to top", CATEGORY_NAVIGATION),
    CommandDefinition("G", "Go to bottom", CATEGORY_NAVIGATION),
    CommandDefinition(HINT_KEY, "Show link hints", CATEGORY_LINKS),
    CommandDefinition(HINT_NEW_TAB_KEY, "Show link hints (new tab)", CATEGORY_LINKS),
    CommandDefinition(HELP_TOGGLE_KEY, "Show/hide help", CATEGORY_HELP),
)


def group_commands_by_category(
    commands: tuple[CommandDefinition, ...] | list[CommandDefinition] = COMMAND_DEFINITIONS,
) -> dict[str, list[CommandDefinition]]:
    """Group commands by category, keeping first-seen category order."""
    grouped: dict[str, list[CommandDefinition]] = {}
    for command in commands:
        grouped.setdefault(command.category, []).append(command)
    return grouped
