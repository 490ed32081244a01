"""Commands delivered by the input collaborator, at most one per tick."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """``(column, row)`` delta of one step in this direction."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class MovePressed:
    """Slide the selected tile into the empty slot."""


@dataclass(frozen=True)
class ShufflePressed:
    """Replace the grid with a fresh solvable arrangement."""


Command = Direction | MovePressed | ShufflePressed
