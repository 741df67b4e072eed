"""Typer entry-point wiring for the UNO simulator CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from .. import simulation
from ..cards import DEFAULT_SEED
from ..game import UnoGame
from ..log import setup_logging
from ..state import DEFAULT_HAND_SIZE
from .render import render_series, render_state

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _print_plain(message: str) -> None:
    console.print(message, markup=False, highlight=False, soft_wrap=True)


@app.command()
def play(
    players: int = typer.Option(2, min=2, help="Number of seated players."),
    seed: int = typer.Option(DEFAULT_SEED, help="Shuffle seed; the same seed replays the same game."),
    hand_size: int = typer.Option(DEFAULT_HAND_SIZE, min=0, help="Cards dealt to each player."),
    max_turns: int = typer.Option(
        simulation.DEFAULT_MAX_TURNS, min=1, help="Stop after this many turns without a winner."
    ),
    rich_view: bool = typer.Option(
        False,
        "--rich/--plain",
        help="Render a table panel per turn instead of the one-line status.",
    ),
    reveal: bool = typer.Option(False, "--reveal", help="Show every hand in the rich view."),
    log_level: str = typer.Option("WARNING", help="Logging level for engine messages."),
) -> None:
    """Play one self-driving game, printing the table after every turn."""

    if reveal and not rich_view:
        raise typer.BadParameter("--reveal only applies to the --rich view.")
    setup_logging(log_level)

    game = UnoGame(players, seed=seed, hand_size=hand_size)
    game.initialize()

    def _show(current: UnoGame) -> None:
        if not rich_view:
            _print_plain(current.get_state())
            return
        outcome = current.last_outcome
        events = [outcome.describe()] if outcome is not None else []
        console.print(render_state(current.table, reveal_hands=reveal, events=events))

    turns = simulation.play_game(game, max_turns=max_turns, on_turn=_show)

    winner = game.get_winner()
    if winner is None:
        console.print(f"[red]No winner after {turns} turns (stalemate).[/red]")
        raise typer.Exit(code=1)
    _print_plain(f"Winner is Player {winner}!")


@app.command()
def simulate(
    games: int = typer.Option(10, min=1, help="Number of games to play."),
    players: int = typer.Option(2, min=2, help="Number of seated players."),
    seed: int = typer.Option(DEFAULT_SEED, help="Seed of the first game; later games add one each."),
    hand_size: int = typer.Option(DEFAULT_HAND_SIZE, min=0, help="Cards dealt to each player."),
    max_turns: int = typer.Option(
        simulation.DEFAULT_MAX_TURNS, min=1, help="Turn cap per game before it counts as a stalemate."
    ),
    log_level: str = typer.Option("WARNING", help="Logging level for engine messages."),
) -> None:
    """Play a series of seeded games and summarise the results."""

    setup_logging(log_level)
    history = simulation.run_series(
        games=games,
        num_players=players,
        seed=seed,
        hand_size=hand_size,
        max_turns=max_turns,
    )
    console.print(render_series(history))


def main() -> None:
    """Entry-point for ``python -m unosim.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
