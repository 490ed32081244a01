"""Produces shuffled grids that are solvable and not already solved."""

from __future__ import annotations

import logging
import random

from taquin.engine.gamesolver import SolvabilityOracle
from taquin.models.grid import Coordinates, Grid, TaquinError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


class ShuffleExhausted(TaquinError, RuntimeError):
    """Raised when no acceptable candidate was found within the attempt budget."""


class ShuffleEngine:
    """Shuffles a grid by rejection sampling.

    Each attempt applies a batch of random transpositions to the grid in
    place, then keeps the result only if it is solvable and not solved.
    A rejected candidate is the starting point of the next batch.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def shuffle(self, grid: Grid) -> int:
        """Shuffle *grid* in place and return the number of attempts used."""
        for attempt in range(1, self.max_attempts + 1):
            self._scramble(grid)
            if grid.is_solved():
                logger.debug("Shuffle attempt %d rejected: solved", attempt)
                continue
            if not SolvabilityOracle.is_solvable(grid):
                logger.debug("Shuffle attempt %d rejected: unsolvable", attempt)
                continue
            logger.info(
                "Shuffled %d×%d grid in %d attempt(s)", grid.size, grid.size, attempt
            )
            return attempt

        raise ShuffleExhausted(
            f"No solvable unsolved arrangement after {self.max_attempts} attempts."
        )

    # -- helpers --------------------------------------------------------------

    def _scramble(self, grid: Grid) -> None:
        """Apply ``(N²)²`` transpositions of two distinct random cells."""
        cells = grid.size * grid.size
        for _ in range(cells * cells):
            a = b = self.rng.randrange(cells)
            while a == b:
                b = self.rng.randrange(cells)
            grid.swap(self._coordinates(grid, a), self._coordinates(grid, b))

    @staticmethod
    def _coordinates(grid: Grid, index: int) -> Coordinates:
        row, column = divmod(index, grid.size)
        return Coordinates(column, row)
