"""Run seeded games back to back and collect their results."""

from __future__ import annotations

import logging
from typing import Callable

from . import scoreboard
from .game import UnoGame
from .state import DEFAULT_HAND_SIZE, clamp_players

__all__ = ["DEFAULT_MAX_TURNS", "play_game", "run_series"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 1000


def play_game(
    game: UnoGame,
    *,
    max_turns: int = DEFAULT_MAX_TURNS,
    on_turn: Callable[[UnoGame], None] | None = None,
) -> int:
    """Drive ``game`` until it ends or ``max_turns`` calls have been made.

    The game must already be initialised. Returns the number of
    :meth:`UnoGame.play_turn` calls made.
    """

    calls = 0
    while not game.is_game_over() and calls < max_turns:
        game.play_turn()
        calls += 1
        if on_turn is not None:
            on_turn(game)
    if not game.is_game_over():
        logger.warning("Game stopped after %d turns without a winner", calls)
    return calls


def run_series(
    *,
    games: int,
    num_players: int,
    seed: int,
    hand_size: int = DEFAULT_HAND_SIZE,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> scoreboard.SeriesHistory:
    """Play ``games`` games using seeds ``seed``, ``seed + 1``, ... ."""

    num_players = clamp_players(num_players)
    history = scoreboard.SeriesHistory(num_players=num_players)
    for offset in range(games):
        game_seed = seed + offset
        game = UnoGame(num_players, seed=game_seed, hand_size=hand_size)
        game.initialize()
        turns = play_game(game, max_turns=max_turns)
        history.record(
            scoreboard.GameSummary(
                game_number=offset + 1,
                seed=game_seed,
                winner_index=game.get_winner(),
                turns=turns,
                cards_left=[len(hand) for hand in game.table.hands],
            )
        )
    logger.info(
        "Series of %d game(s) finished with %d stalemate(s)", games, history.stalemates
    )
    return history
