"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import presenter, scoreboard
from ..cards import Card, Color
from ..state import TableState

_COLOR_STYLES = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.BLUE: "blue",
    Color.YELLOW: "yellow",
}


def format_card(card: Card | None) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card is None:
        return "[dim]None[/dim]"
    style = _COLOR_STYLES.get(card.color, "white")
    if card.is_action:
        style = f"bold {style}"
    return f"[{style}]{card.label()}[/{style}]"


def render_state(
    table: TableState,
    *,
    reveal_hands: bool = False,
    events: Sequence[str] = (),
    title: str = "UNO",
) -> RenderableType:
    """Return a Rich panel describing the current table state."""

    seats = Table(box=box.ROUNDED, expand=True)
    seats.add_column("Player", justify="left", style="bold")
    seats.add_column("Cards", justify="right")
    if reveal_hands:
        seats.add_column("Hand", justify="left")

    for idx, hand in enumerate(table.hands):
        name = f"P{idx}"
        if table.winner == idx:
            name = f"[bold green]{name} (winner)[/bold green]"
        elif idx == table.current_player and not table.game_over:
            name = f"[bold yellow]{name}[/bold yellow]"
        row = [name, str(len(hand))]
        if reveal_hands:
            row.append(" ".join(format_card(card) for card in hand) or "—")
        seats.add_row(*row)

    meta = Table.grid(expand=True)
    meta.add_column(justify="left")
    meta.add_row(f"[cyan]Turn[/cyan]: P{table.current_player}")
    meta.add_row(f"[cyan]Direction[/cyan]: {presenter.direction_label(table.direction)}")
    meta.add_row(f"[cyan]Top[/cyan]: {format_card(table.top_card)}")
    meta.add_row(f"[cyan]Deck[/cyan]: {len(table.deck)} card(s)")
    meta.add_row(f"[cyan]Discard[/cyan]: {len(table.discard)} card(s)")

    components: list[RenderableType] = [seats, meta]
    if events:
        log = Table.grid(expand=True)
        log.add_column(justify="left")
        for line in events:
            log.add_row(line)
        components.append(Panel(log, title="Last turn", border_style="magenta", box=box.SIMPLE))

    return Panel(Group(*components), title=title, padding=(0, 1), border_style="cyan")


def render_series(history: scoreboard.SeriesHistory) -> Table:
    """Return the aggregated series summary table."""

    totals = history.totals()
    table = Table(title="Series Summary", box=box.SIMPLE_HEAVY)
    table.add_column("Player", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Cards left", justify="right")

    best = max((total.wins for total in totals), default=0)
    for total in totals:
        label = f"P{total.player_index}"
        wins = str(total.wins)
        if history.games and best and total.wins == best:
            label = f"[bold blue]{label}[/bold blue]"
            wins = f"[bold blue]{wins}[/bold blue]"
        table.add_row(label, wins, str(total.cards_left))

    table.caption = (
        f"{len(history.games)} game(s), {history.stalemates} stalemate(s), "
        f"{history.average_turns():.1f} turns on average"
    )
    return table
