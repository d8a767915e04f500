"""uno_engine/cli.py - Typer-based CLI for the UNO deck and turn engine."""

import random
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import Config, load_config
from .exceptions import UnoEngineError
from .game.engine import DeckEngine
from .game.helpers import serialize_cards
from .log_setup import setup_logging
from .persistence import GameStore

# Main app
app = typer.Typer(
    name="uno",
    help="UNO deck and turn engine",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


@dataclass
class _CliState:
    config: Config
    store_path: str


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(
        "config.yaml",
        "--config",
        "-c",
        help="Path to configuration YAML file",
    ),
    store: Optional[Path] = typer.Option(
        None,
        "--store",
        "-s",
        help="Override the game store snapshot path",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to the console",
    ),
):
    """Load configuration and logging shared by every command."""
    cfg = load_config(str(config))
    setup_logging(cfg, verbose=verbose)
    ctx.obj = _CliState(
        config=cfg,
        store_path=str(store) if store else cfg.persistence.store_path,
    )


@contextmanager
def _session(ctx: typer.Context) -> Iterator[DeckEngine]:
    """Yields an engine over the snapshot store, saving it back on success."""
    state: _CliState = ctx.obj
    store = GameStore.load(state.store_path)
    seed = state.config.system.seed
    engine = DeckEngine(
        store,
        rules=state.config.uno_rules,
        rng=random.Random(seed) if seed is not None else None,
    )
    try:
        yield engine
    except UnoEngineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        raise typer.Exit(1)
    store.dump(state.store_path)


@app.command("new-game", help="Create an empty game")
def new_game(ctx: typer.Context):
    with _session(ctx) as engine:
        game = engine.store.create_game()
    console.print(game.id)


@app.command("new-player", help="Create a player")
def new_player(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Display name"),
):
    with _session(ctx) as engine:
        player = engine.store.create_player(name)
    console.print(player.id)


@app.command("join", help="Seat a player in a game")
def join(
    ctx: typer.Context,
    game_id: str = typer.Argument(..., help="Game id"),
    player_id: str = typer.Argument(..., help="Player id"),
):
    with _session(ctx) as engine:
        game = engine.store.join_game(game_id, player_id)
    console.print(f"{player_id} joined {game.id} ({len(game.players)} players)")


@app.command("deal", help="Deal a starting hand to every player")
def deal(
    ctx: typer.Context,
    game_id: str = typer.Argument(..., help="Game id"),
):
    with _session(ctx) as engine:
        game = engine.deal_cards(game_id)
    _print_game(game)


@app.command("start", help="Deal hands and turn up the first discard")
def start(
    ctx: typer.Context,
    game_id: str = typer.Argument(..., help="Game id"),
):
    with _session(ctx) as engine:
        game = engine.start_game(game_id)
    _print_game(game)


@app.command("draw", help="Draw a card for the player whose turn it is")
def draw(
    ctx: typer.Context,
    game_id: str = typer.Argument(..., help="Game id"),
    player_id: str = typer.Argument(..., help="Player id"),
):
    with _session(ctx) as engine:
        game = engine.draw_card(game_id, player_id)
    player = game.find_player(player_id)
    console.print(f"{escape(player.name)} drew [bold]{player.cards[-1]}[/bold]")


@app.command("show", help="Display piles and hands")
def show(
    ctx: typer.Context,
    game_id: str = typer.Argument(..., help="Game id"),
):
    with _session(ctx) as engine:
        game = engine.store.lookup_game(game_id)
    _print_game(game)


def _print_game(game) -> None:
    table = Table(title=f"Game {game.id}")
    table.add_column("Seat", style="cyan")
    table.add_column("Player", style="cyan")
    table.add_column("Cards", style="green")

    for seat, player in enumerate(game.players):
        marker = "*" if seat == game.current_player else ""
        table.add_row(
            f"{seat}{marker}",
            f"{escape(player.name)} ({player.id})",
            ", ".join(serialize_cards(player.cards)) or "-",
        )

    console.print(table)
    console.print(
        f"Draw pile: {len(game.draw_pile)}  "
        f"Discard pile: {len(game.discard_pile)}  "
        f"Top discard: {game.top_discard or '-'}"
    )


if __name__ == "__main__":
    app()
