"""Hint label generation tests."""

from __future__ import annotations

import unittest

from musophobia.hints.labels import HINT_ALPHABET, HintCapacityError, generate_hint_labels, hint_capacity


class GenerateHintLabelsTests(unittest.TestCase):
    def test_zero_count_returns_empty_list(self) -> None:
        self.assertEqual(generate_hint_labels(0), [])

    def test_small_counts_use_single_characters_in_alphabet_order(self) -> None:
        for count in range(len(HINT_ALPHABET) + 1):
            labels = generate_hint_labels(count)
            self.assertEqual(labels, list(HINT_ALPHABET[:count]))

    def test_larger_counts_use_two_characters_only(self) -> None:
        for count in (len(HINT_ALPHABET) + 1, 20, hint_capacity()):
            labels = generate_hint_labels(count)
            self.assertEqual(len(labels), count)
            self.assertEqual(len(set(labels)), count)
            self.assertTrue(all(len(label) == 2 for label in labels))

    def test_two_character_labels_are_row_major(self) -> None:
        labels = generate_hint_labels(9)
        self.assertEqual(labels, ["ss", "sa", "sd", "sf", "sj", "sk", "sl", "as", "aa"])

    def test_capacity_is_alphabet_squared(self) -> None:
        self.assertEqual(hint_capacity(), 49)
        self.assertEqual(hint_capacity("ab"), 4)

    def test_counts_beyond_capacity_are_rejected(self) -> None:
        with self.assertRaises(HintCapacityError):
            generate_hint_labels(hint_capacity() + 1)
        with self.assertRaises(ValueError):
            generate_hint_labels(-1)

    def test_custom_alphabet(self) -> None:
        self.assertEqual(generate_hint_labels(3, "ab"), ["aa", "ab", "ba"])


if __name__ == "__main__":
    unittest.main()
