"""Helpers for tracking results across a series of games."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["GameSummary", "PlayerSeriesTotal", "SeriesHistory"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured after a single game finished or hit its turn cap."""

    game_number: int
    seed: int
    winner_index: int | None
    turns: int
    cards_left: Sequence[int]

    @property
    def is_stalemate(self) -> bool:
        return self.winner_index is None


@dataclass(frozen=True, slots=True)
class PlayerSeriesTotal:
    """Aggregate totals for one seat across all recorded games."""

    player_index: int
    wins: int
    cards_left: int


@dataclass(slots=True)
class SeriesHistory:
    """Mutable tracker that accumulates game summaries for a series."""

    num_players: int
    games: list[GameSummary] = field(default_factory=list)
    _wins: list[int] = field(init=False, repr=False)
    _cards_left: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.num_players <= 0:
            raise ValueError("num_players must be positive")
        self._wins = [0 for _ in range(self.num_players)]
        self._cards_left = [0 for _ in range(self.num_players)]

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if len(summary.cards_left) != self.num_players:
            raise ValueError("hand count does not match number of players")
        winner = summary.winner_index
        if winner is not None and not 0 <= winner < self.num_players:
            raise ValueError("winner index out of range")
        self.games.append(summary)
        for idx, remaining in enumerate(summary.cards_left):
            self._cards_left[idx] += remaining
        if winner is not None:
            self._wins[winner] += 1

    @property
    def stalemates(self) -> int:
        return sum(1 for game in self.games if game.is_stalemate)

    def average_turns(self) -> float:
        if not self.games:
            return 0.0
        return sum(game.turns for game in self.games) / len(self.games)

    def totals(self) -> list[PlayerSeriesTotal]:
        """Return the cumulative totals for each player in seating order."""

        return [
            PlayerSeriesTotal(
                player_index=idx,
                wins=self._wins[idx],
                cards_left=self._cards_left[idx],
            )
            for idx in range(self.num_players)
        ]
