"""Rich terminal frontend — tables, colours, and panels.

Stands in for the render, UI, and audio collaborators: it turns
keypresses into engine commands and reacts to the transitions the
engine returns.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taquin.engine.gameplay import Taquin
from taquin.frontend.cli.input_handler import get_key
from taquin.models.commands import Command, Direction, MovePressed, ShufflePressed
from taquin.models.grid import Coordinates, Grid
from taquin.models.transitions import Shuffled, Solved, TileMoved, Transition

logger = logging.getLogger(__name__)

console = Console()

_COMMANDS: dict[str, Command] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "move": MovePressed(),
    "shuffle": ShufflePressed(),
}


# -- transition consumer ------------------------------------------------------


@dataclass
class Scoreboard:
    """Move counter and status line driven by engine transitions."""

    moves: int = 0
    solved: bool = True
    shuffled: bool = False
    celebrated: bool = False

    def apply(self, transitions: list[Transition]) -> None:
        for transition in transitions:
            if isinstance(transition, Shuffled):
                self.moves = 0
                self.solved = False
                self.shuffled = True
                self.celebrated = False
            elif isinstance(transition, TileMoved):
                self.moves += 1
                self.solved = False
                self.celebrated = False
            elif isinstance(transition, Solved):
                self.solved = True
                self.shuffled = False
                self.celebrated = transition.celebrate
                if transition.celebrate:
                    console.bell()

    @property
    def status(self) -> str:
        if self.solved:
            return "solved"
        if self.shuffled:
            return "shuffled"
        return ""

    @property
    def can_shuffle_hint(self) -> bool:
        """Show the "press R" affordance until the board has been shuffled."""
        return not self.shuffled


# -- board rendering ----------------------------------------------------------


def tile_face(value: int, letters: bool) -> str:
    """Label for tile *value*: its number, or a letter when *letters* is set."""
    if letters and value <= len(string.ascii_uppercase):
        return string.ascii_uppercase[value - 1]
    return str(value)


def render_grid(grid: Grid, selected: Coordinates, letters: bool = False) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.sentinel - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.snapshot()):
        cells: list[str] = []
        for c, val in enumerate(row):
            coord = Coordinates(c, r)
            face = tile_face(val, letters)
            if val == grid.sentinel:
                cells.append("[dim]·[/dim]")
            elif coord == selected:
                cells.append(f"[bold white on red]{face:>{width}}[/bold white on red]")
            elif grid.is_tile_correct(coord):
                cells.append(f"[bold green]{face:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{face:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw(game: Taquin, board: Scoreboard, letters: bool) -> None:
    console.clear()

    size = game.size
    parts = [Align.center(render_grid(game.grid, game.selected, letters))]

    if board.celebrated:
        banner = Text()
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("SOLVED!", style="bold green")
        banner.append("  ★\n", style="bold yellow")
        parts.append(Align.center(banner))

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(board.moves), style="bold yellow")
    if board.status:
        stats.append(f"    {board.status}", style="dim")
    parts.append(Align.center(stats))

    if board.can_shuffle_hint:
        parts.append(
            Align.center(Text("  Press R to shuffle", style="bold yellow"))
        )

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("T", style="bold cyan")
    controls.append("  faces   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    border = "bold green" if board.celebrated else "bright_blue"
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Taquin  {size}×{size}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(game: Taquin) -> None:
    """Run the tick loop: one keypress, one command, one redraw."""
    board = Scoreboard()
    letters = False

    while True:
        _draw(game, board, letters)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key == "toggle":
            letters = not letters
            continue

        command = _COMMANDS.get(key)
        if command is None:
            continue
        transitions = game.handle(command)
        logger.debug("%s -> %s", key, transitions)
        board.apply(transitions)


# -- public entry point -------------------------------------------------------


def run(game: Taquin) -> None:
    """Launch the Rich frontend on an existing session."""
    _play(game)
