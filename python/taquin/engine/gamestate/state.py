"""Tracks the mutable state of a puzzle session."""

from __future__ import annotations

from taquin.models.grid import Coordinates, Grid


class PuzzleState:
    """Holds the grid, the selected tile, and whether a shuffle is pending.

    ``is_shuffled`` is raised by a shuffle and lowered the first time the
    solved condition is observed afterwards.
    """

    def __init__(self, size: int) -> None:
        self.grid = Grid(size)
        self._selected = Coordinates(0, 0)
        self.is_shuffled: bool = False

    @property
    def size(self) -> int:
        return self.grid.size

    # -- selection ------------------------------------------------------------

    @property
    def selected(self) -> Coordinates:
        return self._selected

    @selected.setter
    def selected(self, coord: Coordinates) -> None:
        if self.grid.is_empty(coord):
            raise ValueError(f"Cannot select the empty slot at {coord}.")
        self._selected = coord

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.grid.is_solved()
