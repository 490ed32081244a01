"""Core gameplay logic — dispatches commands and reports transitions."""

from __future__ import annotations

import logging
import random

from taquin.engine.gamegenerator import ShuffleEngine
from taquin.engine.gamegenerator.shuffle import DEFAULT_MAX_ATTEMPTS
from taquin.engine.gameplay.cursor import SelectionCursor
from taquin.engine.gameplay.mover import MoveExecutor
from taquin.engine.gamestate import PuzzleState
from taquin.models.commands import Command, Direction, MovePressed, ShufflePressed
from taquin.models.grid import Coordinates, Grid
from taquin.models.transitions import Shuffled, Transition

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 3


class Taquin:
    """Orchestrates a single puzzle session.

    The session starts solved with the top-left tile selected.  Every
    command returns the transitions it produced, in order; presentation
    code reads the grid through :attr:`grid` and never mutates it.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        rng: random.Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.state = PuzzleState(size)
        self.cursor = SelectionCursor(self.state)
        self.mover = MoveExecutor(self.state)
        self.shuffler = ShuffleEngine(rng, max_attempts=max_attempts)

    @classmethod
    def from_grid(cls, grid: Grid, selected: Coordinates | None = None) -> Taquin:
        """Create a session around an existing grid (e.g. in tests)."""
        game = cls(grid.size)
        game.state.grid = grid
        if selected is None:
            selected = next(
                Coordinates(c, r)
                for r in range(grid.size)
                for c in range(grid.size)
                if not grid.is_empty(Coordinates(c, r))
            )
        game.state.selected = selected
        return game

    # -- commands -------------------------------------------------------------

    def handle(self, command: Command) -> list[Transition]:
        """Process one command and return the resulting transitions."""
        if isinstance(command, Direction):
            self.select(command)
            return []
        if isinstance(command, MovePressed):
            return self.move()
        if isinstance(command, ShufflePressed):
            return self.shuffle()
        raise TypeError(f"Unknown command: {command!r}")

    def select(self, direction: Direction) -> Coordinates:
        return self.cursor.step(direction)

    def move(self) -> list[Transition]:
        return self.mover.try_move()

    def shuffle(self) -> list[Transition]:
        """Shuffle the grid; the selection keeps following its tile.

        The shuffle runs on a copy, so a ``ShuffleExhausted`` leaves the
        session exactly as it was.
        """
        state = self.state
        selected_value = state.grid.value_at(state.selected)
        candidate = state.grid.copy()
        self.shuffler.shuffle(candidate)
        state.grid = candidate
        state.selected = candidate.coordinates_of(selected_value)
        state.is_shuffled = True
        return [Shuffled()]

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def selected(self) -> Coordinates:
        return self.state.selected

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
