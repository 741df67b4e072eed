from __future__ import annotations

from unosim import presenter
from unosim.cards import Card, Color, Rank
from unosim.state import COUNTER_CLOCKWISE, TableState


def test_describe_state_formats_every_field() -> None:
    table = TableState(
        num_players=3,
        hands=[
            [Card(Color.BLUE, Rank.ONE)],
            [],
            [Card(Color.RED, Rank.TWO), Card(Color.RED, Rank.THREE), Card(Color.GREEN, Rank.SKIP)],
        ],
        discard=[Card(Color.YELLOW, Rank.FOUR), Card(Color.RED, Rank.DRAW_TWO)],
        current_player=2,
        direction=COUNTER_CLOCKWISE,
    )

    assert presenter.describe_state(table) == (
        "Player 2's turn, Direction: Counter-clockwise, Top: Red Draw Two, "
        "Players cards: P0:1, P1:0, P2:3"
    )


def test_describe_state_without_top_card() -> None:
    table = TableState(num_players=2)

    assert presenter.describe_state(table) == (
        "Player 0's turn, Direction: Clockwise, Top: None, Players cards: P0:0, P1:0"
    )


def test_describe_state_does_not_mutate() -> None:
    table = TableState(num_players=2, discard=[Card(Color.GREEN, Rank.NINE)])

    presenter.describe_state(table)

    assert table.discard == [Card(Color.GREEN, Rank.NINE)]
    assert table.hands == [[], []]
