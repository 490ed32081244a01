"""Taquin — sliding-tile puzzle in the terminal.

Usage::

    taquin                   # 3×3 puzzle
    taquin -s 4              # 4×4 puzzle
    taquin --seed 42         # reproducible shuffles
    python -m taquin --log-level debug
"""

import logging
import random
from enum import StrEnum
from typing import Optional

import typer
from rich.logging import RichHandler

from taquin.engine.gameplay import DEFAULT_SIZE, Taquin
from taquin.models.grid import TaquinError


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        envvar="TAQUIN_SIZE",
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="TAQUIN_SEED",
        help="Seed for the shuffle random generator.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="TAQUIN_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Taquin sliding puzzle."""
    _configure_logging(log_level)

    from taquin.frontend.cli import app as frontend

    try:
        game = Taquin(size, rng=random.Random(seed))
        frontend.run(game)
    except TaquinError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
