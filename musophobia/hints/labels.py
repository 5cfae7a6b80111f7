"""Hint label generation.

Labels are drawn from a home-row alphabet. Small target counts get one
keystroke each; larger counts switch every label to two characters so no
label is ever a prefix of another.
"""

from __future__ import annotations

HINT_ALPHABET = "sadfjkl"


class HintCapacityError(ValueError):
    """Raised when more labels are requested than two characters can spell."""


def hint_capacity(alphabet: str = HINT_ALPHABET) -> int:
    """Return the largest count ``generate_hint_labels`` accepts."""
    return len(alphabet) ** 2


def generate_hint_labels(count: int, alphabet: str = HINT_ALPHABET) -> list[str]:
    """Return ``count`` unique labels, all of the same length.

    ``count <= len(alphabet)`` yields single characters in alphabet order.
    Larger counts yield two-character labels in row-major base-``A`` order.
    Counts beyond ``len(alphabet) ** 2`` raise ``HintCapacityError``.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    if count == 0:
        return []

    size = len(alphabet)
    if count <= size:
        return list(alphabet[:count])

    if count > hint_capacity(alphabet):
        raise HintCapacityError(
            f"cannot label {count} targets with two characters from {alphabet!r} "
            f"(capacity {hint_capacity(alphabet)})"
        )

    return [alphabet[(index // size) % size] + alphabet[index % size] for index in range(count)]
