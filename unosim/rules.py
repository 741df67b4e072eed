"""Turn resolution rules for the UNO simulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .cards import Card, Rank
from .state import TableState

__all__ = [
    "TurnKind",
    "TurnOutcome",
    "is_playable",
    "choose_card_index",
    "advance",
    "apply_effect",
    "find_winner",
    "play_turn",
]

logger = logging.getLogger(__name__)


class TurnKind(str, Enum):
    """What happened during a single call to :func:`play_turn`."""

    NOOP = "noop"
    STALEMATE = "stalemate"
    PLAYED = "played"
    DRAW_PLAYED = "draw_played"
    DREW = "drew"
    PASSED = "passed"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    """Record of one resolved turn."""

    player: int
    kind: TurnKind
    card: Card | None = None
    drawn: Card | None = None
    target: int | None = None
    penalty_cards: int = 0

    def describe(self) -> str:
        """Return a short human readable summary of the turn."""

        actor = f"P{self.player}"
        if self.kind == TurnKind.PLAYED and self.card is not None:
            text = f"{actor} played {self.card.label()}"
        elif self.kind == TurnKind.DRAW_PLAYED and self.card is not None:
            text = f"{actor} drew and played {self.card.label()}"
        elif self.kind == TurnKind.DREW and self.drawn is not None:
            text = f"{actor} drew {self.drawn.label()}"
        elif self.kind == TurnKind.PASSED:
            text = f"{actor} passed (deck empty)"
        elif self.kind == TurnKind.GAME_OVER:
            text = f"{actor} has no cards left"
        elif self.kind == TurnKind.STALEMATE:
            text = "No cards to play or draw"
        else:
            text = "Game already over"
        if self.penalty_cards and self.target is not None:
            text += f"; P{self.target} draws {self.penalty_cards}"
        return text


def is_playable(card: Card, top: Card) -> bool:
    """Return ``True`` when ``card`` matches ``top`` by colour or rank."""

    return card.color == top.color or card.rank == top.rank


def choose_card_index(hand: Sequence[Card], top: Card) -> int | None:
    """Pick the card to play from ``hand`` against ``top``.

    Priority: first colour match, then first rank match, then the first
    Skip, Reverse or Draw Two of any colour (in that kind order).
    """

    for idx, card in enumerate(hand):
        if card.color == top.color:
            return idx
    for idx, card in enumerate(hand):
        if card.rank == top.rank:
            return idx
    for kind in Rank.actions():
        for idx, card in enumerate(hand):
            if card.rank == kind:
                return idx
    return None


def advance(table: TableState, steps: int = 1) -> None:
    """Move the turn ``steps`` seats along the current direction."""

    table.current_player = table.player_after(table.current_player, steps)


def apply_effect(table: TableState, card: Card) -> tuple[int | None, int]:
    """Apply the effect of ``card`` just placed on the discard pile.

    Returns the Draw Two target and how many cards it actually drew, or
    ``(None, 0)`` for every other card.
    """

    if card.rank == Rank.SKIP:
        advance(table, 2)
    elif card.rank == Rank.REVERSE:
        table.direction *= -1
        advance(table, 1)
    elif card.rank == Rank.DRAW_TWO:
        target = table.player_after(table.current_player)
        drawn = 0
        for _ in range(2):
            penalty = table.draw()
            if penalty is None:
                break
            table.hands[target].append(penalty)
            drawn += 1
        table.current_player = table.player_after(target)
        return target, drawn
    else:
        advance(table, 1)
    return None, 0


def find_winner(table: TableState) -> int | None:
    """Return the lowest seat holding an empty hand."""

    for idx, hand in enumerate(table.hands):
        if not hand:
            return idx
    return None


def _finish(table: TableState, winner: int) -> None:
    table.game_over = True
    table.winner = winner
    logger.info("Player %d wins", winner)


def _resolve(table: TableState) -> TurnOutcome:
    if table.game_over:
        return TurnOutcome(player=table.current_player, kind=TurnKind.NOOP)

    if not table.discard and table.flip_to_discard() is None:
        return TurnOutcome(player=table.current_player, kind=TurnKind.STALEMATE)

    player = table.current_player
    hand = table.hands[player]
    if not hand:
        _finish(table, player)
        return TurnOutcome(player=player, kind=TurnKind.GAME_OVER)

    top = table.discard[-1]
    idx = choose_card_index(hand, top)
    if idx is not None:
        played = hand.pop(idx)
        table.discard.append(played)
        target, penalty = apply_effect(table, played)
        return TurnOutcome(player, TurnKind.PLAYED, card=played, target=target, penalty_cards=penalty)

    drawn = table.draw()
    if drawn is None:
        advance(table, 1)
        return TurnOutcome(player=player, kind=TurnKind.PASSED)

    if is_playable(drawn, top):
        table.discard.append(drawn)
        target, penalty = apply_effect(table, drawn)
        return TurnOutcome(
            player,
            TurnKind.DRAW_PLAYED,
            card=drawn,
            drawn=drawn,
            target=target,
            penalty_cards=penalty,
        )

    hand.append(drawn)
    advance(table, 1)
    return TurnOutcome(player=player, kind=TurnKind.DREW, drawn=drawn)


def play_turn(table: TableState) -> TurnOutcome:
    """Resolve exactly one turn attempt against ``table``.

    Never raises: an empty deck, discard pile or hand degrades to a pass,
    a no-op or a win rather than an error.
    """

    outcome = _resolve(table)
    if outcome.kind in (TurnKind.NOOP, TurnKind.STALEMATE, TurnKind.GAME_OVER):
        logger.debug("%s", outcome.describe())
        return outcome

    winner = find_winner(table)
    if winner is not None:
        _finish(table, winner)
    logger.debug("%s -> P%d", outcome.describe(), table.current_player)
    return outcome
