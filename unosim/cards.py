"""Card abstractions and deck construction for the UNO simulator."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable

__all__ = [
    "Color",
    "Rank",
    "Card",
    "DECK_SIZE",
    "DEFAULT_SEED",
    "iter_full_deck",
    "build_deck",
    "shuffled_deck",
]

DECK_SIZE: Final[int] = 100
DEFAULT_SEED: Final[int] = 1234


class Color(str, Enum):
    """Enumeration of the four card colours in catalog order."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"


class Rank(str, Enum):
    """Number ranks followed by the action kinds."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SKIP = "Skip"
    REVERSE = "Reverse"
    DRAW_TWO = "Draw Two"

    @classmethod
    def numbers(cls) -> tuple["Rank", ...]:
        """Return number ranks in ascending order."""

        return (
            cls.ZERO,
            cls.ONE,
            cls.TWO,
            cls.THREE,
            cls.FOUR,
            cls.FIVE,
            cls.SIX,
            cls.SEVEN,
            cls.EIGHT,
            cls.NINE,
        )

    @classmethod
    def actions(cls) -> tuple["Rank", ...]:
        """Return action kinds in the order used for fallback selection."""

        return (cls.SKIP, cls.REVERSE, cls.DRAW_TWO)

    @property
    def is_action(self) -> bool:
        return self in Rank.actions()


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single UNO card."""

    color: Color
    rank: Rank

    @property
    def is_action(self) -> bool:
        """Return ``True`` for Skip, Reverse and Draw Two cards."""

        return self.rank.is_action

    def label(self) -> str:
        """Create a display label such as ``"Blue 3"`` or ``"Red Draw Two"``."""

        return f"{self.color.value} {self.rank.value}"


def iter_full_deck() -> Iterable[Card]:
    """Yield all 100 cards in canonical, unshuffled order."""

    for color in Color:
        yield Card(color, Rank.ZERO)
        for rank in Rank.numbers()[1:]:
            yield Card(color, rank)
            yield Card(color, rank)
        for rank in Rank.actions():
            yield Card(color, rank)
            yield Card(color, rank)


def build_deck() -> list[Card]:
    """Return a fresh list holding the canonical deck."""

    return list(iter_full_deck())


def shuffled_deck(seed: int = DEFAULT_SEED) -> list[Card]:
    """Return the canonical deck permuted by a freshly seeded generator.

    The generator is created right before shuffling, so the same ``seed``
    always produces the same order regardless of prior calls.
    """

    deck = build_deck()
    rng = random.Random(seed)
    rng.shuffle(deck)
    return deck
