"""Moves the tile highlight around the grid."""

from __future__ import annotations

from taquin.engine.gamestate import PuzzleState
from taquin.models.commands import Direction
from taquin.models.grid import Coordinates


class SelectionCursor:
    """Navigates the selection with wraparound, hopping over the empty slot."""

    def __init__(self, state: PuzzleState) -> None:
        self.state = state

    def step(self, direction: Direction) -> Coordinates:
        """Select the next tile in *direction* and return its coordinates.

        Columns wrap for left/right and rows wrap for up/down.  Landing on
        the empty slot steps once more; one extra step is enough since the
        grid has a single blank.
        """
        state = self.state
        candidate = self._advance(state.selected, direction)
        if candidate == state.grid.empty_coordinates():
            candidate = self._advance(candidate, direction)
        state.selected = candidate
        return candidate

    def _advance(self, coord: Coordinates, direction: Direction) -> Coordinates:
        size = self.state.size
        dc, dr = direction.offset
        return Coordinates((coord.column + dc) % size, (coord.row + dr) % size)
