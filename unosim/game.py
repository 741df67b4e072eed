"""Game object wiring the deck, table state, turn rules and presenter together."""

from __future__ import annotations

import logging

from . import presenter, rules
from .cards import DEFAULT_SEED
from .rules import TurnOutcome
from .state import DEFAULT_HAND_SIZE, TableState, UnoConfig, deal_new_game, new_table

__all__ = ["UnoGame"]

logger = logging.getLogger(__name__)


class UnoGame:
    """Self-playing UNO table.

    Each instance owns its table outright. Queries before :meth:`initialize`
    see an empty table: no winner, no top card and zero cards per player.
    """

    def __init__(
        self,
        num_players: int,
        *,
        seed: int = DEFAULT_SEED,
        hand_size: int = DEFAULT_HAND_SIZE,
    ) -> None:
        self._config = UnoConfig(num_players=num_players, hand_size=hand_size, seed=seed)
        self._table: TableState = new_table(self._config.num_players)
        self._last_outcome: TurnOutcome | None = None
        self._turns_played = 0

    @property
    def config(self) -> UnoConfig:
        return self._config

    @property
    def num_players(self) -> int:
        return self._config.num_players

    @property
    def table(self) -> TableState:
        """The live table; callers should treat it as read-only."""

        return self._table

    @property
    def last_outcome(self) -> TurnOutcome | None:
        return self._last_outcome

    @property
    def turns_played(self) -> int:
        """Number of :meth:`play_turn` calls that changed the table."""

        return self._turns_played

    def initialize(self) -> None:
        """Shuffle with the configured seed, deal and flip the starting card."""

        deal_new_game(self._config, self._table)
        self._last_outcome = None
        self._turns_played = 0
        logger.info(
            "Dealt %d player(s) with seed %d; top card %s",
            self.num_players,
            self._config.seed,
            presenter.format_card(self._table.top_card),
        )

    def play_turn(self) -> None:
        """Resolve one turn; does nothing once the game is over."""

        outcome = rules.play_turn(self._table)
        self._last_outcome = outcome
        if outcome.kind not in (rules.TurnKind.NOOP, rules.TurnKind.STALEMATE):
            self._turns_played += 1

    def is_game_over(self) -> bool:
        return self._table.game_over

    def get_winner(self) -> int | None:
        """Return the winning seat, or ``None`` while the game is undecided."""

        if not self._table.game_over:
            return None
        return self._table.winner

    def get_state(self) -> str:
        return presenter.describe_state(self._table)

    def card_count(self) -> int:
        return self._table.card_count()
