"""Table state data structures for the UNO simulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .cards import DEFAULT_SEED, Card, shuffled_deck

__all__ = [
    "MIN_PLAYERS",
    "DEFAULT_HAND_SIZE",
    "CLOCKWISE",
    "COUNTER_CLOCKWISE",
    "UnoConfig",
    "TableState",
    "clamp_players",
    "new_table",
    "deal_new_game",
]

MIN_PLAYERS = 2
DEFAULT_HAND_SIZE = 7
CLOCKWISE = 1
COUNTER_CLOCKWISE = -1


def clamp_players(num_players: object) -> int:
    """Return ``num_players`` as an int, raised to ``MIN_PLAYERS`` when invalid."""

    try:
        value = int(num_players)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return MIN_PLAYERS
    return max(value, MIN_PLAYERS)


@dataclass(slots=True)
class UnoConfig:
    """Runtime configuration for a single game."""

    num_players: int
    hand_size: int = DEFAULT_HAND_SIZE
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        self.num_players = clamp_players(self.num_players)
        self.hand_size = max(int(self.hand_size), 0)


@dataclass(slots=True)
class TableState:
    """Mutable state of one table: hands, piles, turn order and result."""

    num_players: int
    hands: List[List[Card]] = field(default_factory=list)
    deck: List[Card] = field(default_factory=list)
    discard: List[Card] = field(default_factory=list)
    current_player: int = 0
    direction: int = CLOCKWISE
    game_over: bool = False
    winner: int | None = None

    def __post_init__(self) -> None:
        self.num_players = clamp_players(self.num_players)
        while len(self.hands) < self.num_players:
            self.hands.append([])

    @property
    def top_card(self) -> Card | None:
        """Return the top of the discard pile, if any."""

        return self.discard[-1] if self.discard else None

    def card_count(self) -> int:
        """Return the number of cards across hands, deck and discard."""

        return sum(len(hand) for hand in self.hands) + len(self.deck) + len(self.discard)

    def draw(self) -> Card | None:
        """Pop the deck's top card, or return ``None`` when it is empty."""

        if not self.deck:
            return None
        return self.deck.pop()

    def flip_to_discard(self) -> Card | None:
        """Move one card from the deck top onto the discard pile."""

        card = self.draw()
        if card is not None:
            self.discard.append(card)
        return card

    def player_after(self, player_index: int, steps: int = 1) -> int:
        """Return the seat ``steps`` positions from ``player_index`` in play order."""

        return (player_index + steps * self.direction) % self.num_players

    def reset(self, deck_cards: List[Card]) -> None:
        """Replace the deck and clear every other zone and the result."""

        self.deck = list(deck_cards)
        self.hands = [[] for _ in range(self.num_players)]
        self.discard = []
        self.current_player = 0
        self.direction = CLOCKWISE
        self.game_over = False
        self.winner = None


def new_table(num_players: int) -> TableState:
    """Return an empty table with the requested (clamped) player count."""

    return TableState(num_players=num_players)


def deal_new_game(config: UnoConfig, table: TableState | None = None) -> TableState:
    """Shuffle, deal and flip the starting card, returning the dealt table.

    When ``table`` is supplied it is reset in place, so dealing again is safe.
    A deck that runs dry mid-deal leaves later players short; an empty deck
    after dealing leaves the discard pile empty.
    """

    if table is None:
        table = new_table(config.num_players)
    table.reset(shuffled_deck(config.seed))

    for _ in range(config.hand_size):
        for hand in table.hands:
            card = table.draw()
            if card is None:
                break
            hand.append(card)

    table.flip_to_discard()
    return table
