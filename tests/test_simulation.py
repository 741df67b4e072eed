from __future__ import annotations

from unosim import simulation
from unosim.game import UnoGame


def test_run_series_records_every_game() -> None:
    history = simulation.run_series(games=3, num_players=2, seed=1234)

    assert len(history.games) == 3
    assert [game.seed for game in history.games] == [1234, 1235, 1236]
    total_wins = sum(total.wins for total in history.totals())
    assert total_wins + history.stalemates == 3


def test_run_series_first_game_matches_single_game() -> None:
    history = simulation.run_series(games=1, num_players=3, seed=7)
    game = UnoGame(3, seed=7)
    game.initialize()
    turns = simulation.play_game(game)

    summary = history.games[0]
    assert summary.turns == turns
    assert summary.winner_index == game.get_winner()
    assert list(summary.cards_left) == [len(hand) for hand in game.table.hands]


def test_turn_cap_counts_as_stalemate() -> None:
    history = simulation.run_series(games=1, num_players=2, seed=1, max_turns=1)

    summary = history.games[0]
    assert summary.turns == 1
    assert summary.is_stalemate
    assert history.stalemates == 1


def test_run_series_clamps_player_count() -> None:
    history = simulation.run_series(games=1, num_players=1, seed=3, max_turns=5)

    assert history.num_players == 2
    assert len(history.games[0].cards_left) == 2


def test_play_game_invokes_callback_each_turn() -> None:
    game = UnoGame(2)
    game.initialize()
    seen: list[str] = []

    calls = simulation.play_game(game, max_turns=4, on_turn=lambda g: seen.append(g.get_state()))

    assert calls == len(seen)
    assert 1 <= calls <= 4
