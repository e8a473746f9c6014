"""
Fresh identifier generation for auxiliary predicates and labels.
"""

from typing import Collection

from ..terms import FreshLabel

ALPHABET_SIZE = 26


def encode_base26(number: int) -> str:
    """
    Render `number` in base 26 with digits 'A'..'Z', most significant first.

    Examples:
        0 -> "A", 25 -> "Z", 26 -> "BA", 676 -> "BAA"
    """
    if number < 0:
        raise ValueError(f"Cannot encode negative number {number}")
    letters = []
    while True:
        letters.append(chr(ord('A') + number % ALPHABET_SIZE))
        number //= ALPHABET_SIZE
        if number == 0:
            break
    return "".join(reversed(letters))


class NameGenerator:
    """
    Deterministic source of fresh names.

    Counters only grow until `reset()` is called. Resetting is never
    automatic: leaving the generator alone across several translations
    keeps every generated name unique within the whole compilation unit,
    resetting it makes a run reproducible.
    """

    def __init__(self, predicate_prefix: str = "tmpPred", label_prefix: str = "lDC"):
        self.predicate_prefix = predicate_prefix
        self.label_prefix = label_prefix
        self.reset()

    def reset(self) -> None:
        """Start naming again from the first name."""
        self._next_predicate_id = 0
        self._next_label_id = 0

    @property
    def predicate_count(self) -> int:
        """How many predicate names were handed out since the last reset."""
        return self._next_predicate_id

    def next_predicate_name(self) -> str:
        name = self.predicate_prefix + encode_base26(self._next_predicate_id)
        self._next_predicate_id += 1
        return name

    def next_label(self, reserved: Collection[str] = ()) -> FreshLabel:
        """
        Allocate a fresh label.

        Names in `reserved` (typically the labels already written in the
        pattern being translated) are skipped, so the rendered rules never
        confuse the fresh label with a user one.
        """
        while True:
            label = FreshLabel(f"{self.label_prefix}{self._next_label_id}")
            self._next_label_id += 1
            if label.name not in reserved:
                return label
