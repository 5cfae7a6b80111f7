"""Help view state and help-text rendering tests."""

from __future__ import annotations

import unittest

from musophobia.commands import COMMAND_DEFINITIONS, group_commands_by_category
from musophobia.render.help import HelpView, help_lines, render_help_text


class HelpViewTests(unittest.TestCase):
    def test_toggle_and_change_notifications(self) -> None:
        changes: list[bool] = []
        view = HelpView(on_change=changes.append)

        self.assertFalse(view.is_visible())
        view.toggle()
        view.show()
        view.toggle()
        view.hide()

        self.assertFalse(view.is_visible())
        self.assertEqual(changes, [True, False])


class HelpTextTests(unittest.TestCase):
    def test_commands_grouped_in_first_seen_order(self) -> None:
        grouped = group_commands_by_category()
        self.assertEqual(list(grouped), ["Navigation", "Links", "Help"])
        self.assertEqual(len(grouped["Navigation"]), 8)

    def test_plain_help_lists_every_command(self) -> None:
        text = render_help_text(color=False)

        self.assertTrue(text.startswith("Keyboard Shortcuts\n"))
        self.assertNotIn("\033[", text)
        for command in COMMAND_DEFINITIONS:
            self.assertIn(command.description, text)
        self.assertIn("  gg  Go to top", text)
        self.assertIn("  G   Go to bottom", text)

    def test_colored_help_highlights_keys(self) -> None:
        lines = help_lines()

        self.assertIn("\033[38;5;229m?\033[0m", "\n".join(lines))
        self.assertEqual(lines[0], "\033[1;38;5;81mKeyboard Shortcuts\033[0m")


if __name__ == "__main__":
    unittest.main()
