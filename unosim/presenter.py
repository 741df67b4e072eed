"""Plain-text snapshot of a table."""

from __future__ import annotations

from .cards import Card
from .state import CLOCKWISE, TableState

__all__ = ["format_card", "direction_label", "describe_state"]


def format_card(card: Card | None) -> str:
    return card.label() if card is not None else "None"


def direction_label(direction: int) -> str:
    return "Clockwise" if direction == CLOCKWISE else "Counter-clockwise"


def describe_state(table: TableState) -> str:
    """Return the one-line status used by the driver loop.

    Example: ``Player 1's turn, Direction: Clockwise, Top: Blue 3, Players cards: P0:6, P1:7``
    """

    counts = ", ".join(f"P{idx}:{len(hand)}" for idx, hand in enumerate(table.hands))
    return (
        f"Player {table.current_player}'s turn, "
        f"Direction: {direction_label(table.direction)}, "
        f"Top: {format_card(table.top_card)}, "
        f"Players cards: {counts}"
    )
