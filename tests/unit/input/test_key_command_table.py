"""Single-key command table tests."""

from __future__ import annotations

import unittest

from musophobia.input.key_registry import KeyBinding, KeyCommandTable


class KeyCommandTableTests(unittest.TestCase):
    def test_dispatch_runs_bound_action(self) -> None:
        calls: list[str] = []
        table = KeyCommandTable().register_bindings(
            KeyBinding(("d",), lambda: calls.append("down")),
            KeyBinding(("u", "U"), lambda: calls.append("up")),
        )

        self.assertTrue(table.dispatch("d"))
        self.assertTrue(table.dispatch("U"))
        self.assertFalse(table.dispatch("x"))
        self.assertEqual(calls, ["down", "up"])

    def test_later_registration_overwrites(self) -> None:
        calls: list[str] = []
        table = KeyCommandTable()
        table.register("G", lambda: calls.append("first"))
        table.register("G", lambda: calls.append("second"))

        table.dispatch("G")
        self.assertEqual(calls, ["second"])
        self.assertIn("G", table)
        self.assertEqual(table.keys(), ["G"])


if __name__ == "__main__":
    unittest.main()
