from __future__ import annotations

import pytest

from unosim import cards, state
from unosim.cards import Card, Color, Rank


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        (2, 2),
        (5, 5),
        (1, 2),
        (0, 2),
        (-4, 2),
        ("three", 2),
        (None, 2),
    ],
)
def test_player_count_is_clamped(requested: object, expected: int) -> None:
    assert state.UnoConfig(num_players=requested).num_players == expected  # type: ignore[arg-type]
    assert state.new_table(requested).num_players == expected  # type: ignore[arg-type]


def test_deal_new_game_deals_round_robin() -> None:
    config = state.UnoConfig(num_players=2)
    order = cards.shuffled_deck(config.seed)

    table = state.deal_new_game(config)

    assert [len(hand) for hand in table.hands] == [7, 7]
    assert len(table.discard) == 1
    assert len(table.deck) == 100 - 15
    assert table.hands[0][0] == order[-1]
    assert table.hands[1][0] == order[-2]
    assert table.hands[0][1] == order[-3]
    assert table.discard == [order[-15]]
    assert table.deck == order[:-15]
    assert table.current_player == 0
    assert table.direction == state.CLOCKWISE
    assert not table.game_over
    assert table.winner is None
    assert table.card_count() == 100


def test_deal_new_game_resets_existing_table() -> None:
    config = state.UnoConfig(num_players=3)
    table = state.deal_new_game(config)
    fresh = state.deal_new_game(config)

    table.hands[0].clear()
    table.direction = state.COUNTER_CLOCKWISE
    table.current_player = 2
    table.game_over = True
    table.winner = 0

    state.deal_new_game(config, table)

    assert table.hands == fresh.hands
    assert table.deck == fresh.deck
    assert table.discard == fresh.discard
    assert table.current_player == 0
    assert table.direction == state.CLOCKWISE
    assert not table.game_over
    assert table.winner is None


def test_deal_stops_when_deck_runs_dry() -> None:
    config = state.UnoConfig(num_players=15)

    table = state.deal_new_game(config)

    sizes = [len(hand) for hand in table.hands]
    assert sizes[:10] == [7] * 10
    assert sizes[10:] == [6] * 5
    assert table.deck == []
    assert table.discard == []
    assert table.top_card is None
    assert table.card_count() == 100


def test_zero_hand_size_only_flips_starting_card() -> None:
    table = state.deal_new_game(state.UnoConfig(num_players=2, hand_size=0))

    assert table.hands == [[], []]
    assert len(table.discard) == 1
    assert len(table.deck) == 99


def test_player_after_wraps_in_both_directions() -> None:
    table = state.TableState(num_players=4)

    assert table.player_after(3) == 0
    assert table.player_after(2, 2) == 0
    table.direction = state.COUNTER_CLOCKWISE
    assert table.player_after(0) == 3
    assert table.player_after(1, 2) == 3


def test_draw_and_flip_on_empty_deck_return_none() -> None:
    table = state.TableState(num_players=2)

    assert table.draw() is None
    assert table.flip_to_discard() is None
    assert table.discard == []

    card = Card(Color.RED, Rank.FIVE)
    table.deck.append(card)
    assert table.flip_to_discard() == card
    assert table.top_card == card
    assert table.deck == []
