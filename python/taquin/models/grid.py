"""Grid model for the taquin puzzle."""

from __future__ import annotations

from typing import NamedTuple


class TaquinError(Exception):
    """Base class for every error raised by the puzzle engine."""


class InvalidSize(TaquinError, ValueError):
    """Raised when a grid is requested with fewer than 2 rows."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Grid size must be at least 2, got {size}.")
        self.size = size


class Coordinates(NamedTuple):
    """A cell address: ``column`` then ``row``, both 0-indexed."""

    column: int
    row: int

    def is_adjacent_to(self, other: Coordinates) -> bool:
        """True when *other* is exactly one cell away (no wraparound)."""
        return abs(self.column - other.column) + abs(self.row - other.row) == 1


class Grid:
    """An N×N matrix of tile values.

    Values are ``1..N²``; ``N²`` is the sentinel that marks the empty slot.
    The sentinel position is tracked on every swap so ``empty_coordinates``
    never needs to scan.
    """

    def __init__(self, size: int) -> None:
        if size < 2:
            raise InvalidSize(size)
        self.size = size
        self._tiles: list[list[int]] = [
            [r * size + c + 1 for c in range(size)] for r in range(size)
        ]
        self._empty = Coordinates(size - 1, size - 1)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, values: list[int]) -> Grid:
        """Create a grid from a flat row-major value list.

        Example::

            Grid.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 9, 8])
        """
        grid = cls(size)
        if sorted(values) != list(range(1, size * size + 1)):
            raise ValueError(
                f"Expected a permutation of 1..{size * size} for a "
                f"{size}×{size} grid, got {values}."
            )
        grid._tiles = [
            list(values[r * size : (r + 1) * size]) for r in range(size)
        ]
        grid._empty = grid.coordinates_of(grid.sentinel)
        return grid

    # -- queries --------------------------------------------------------------

    @property
    def sentinel(self) -> int:
        return self.size * self.size

    def value_at(self, coord: Coordinates) -> int:
        self._check(coord)
        return self._tiles[coord.row][coord.column]

    def is_empty(self, coord: Coordinates) -> bool:
        return self.value_at(coord) == self.sentinel

    def empty_coordinates(self) -> Coordinates:
        return self._empty

    def coordinates_of(self, value: int) -> Coordinates:
        """Return where *value* currently sits."""
        for r, row in enumerate(self._tiles):
            for c, v in enumerate(row):
                if v == value:
                    return Coordinates(c, r)
        raise ValueError(f"Value {value} is not on the grid.")

    def flat(self) -> list[int]:
        """Row-major list of every value, sentinel included."""
        return [v for row in self._tiles for v in row]

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        """Read-only view of the rows for render collaborators."""
        return tuple(tuple(row) for row in self._tiles)

    def is_solved(self) -> bool:
        """Check that the row-major reading is strictly increasing."""
        values = self.flat()
        return all(a < b for a, b in zip(values, values[1:]))

    def is_tile_correct(self, coord: Coordinates) -> bool:
        """Check if the value at *coord* is in its goal position."""
        return self.value_at(coord) == coord.row * self.size + coord.column + 1

    # -- mutation -------------------------------------------------------------

    def swap(self, a: Coordinates, b: Coordinates) -> None:
        """Exchange the values of two cells.

        Adjacency is not checked here; callers that model a slide must
        verify it themselves.
        """
        self._check(a)
        self._check(b)
        tiles = self._tiles
        tiles[a.row][a.column], tiles[b.row][b.column] = (
            tiles[b.row][b.column],
            tiles[a.row][a.column],
        )
        if self._empty == a:
            self._empty = b
        elif self._empty == b:
            self._empty = a

    def copy(self) -> Grid:
        return Grid.from_flat(self.size, self.flat())

    # -- helpers --------------------------------------------------------------

    def _check(self, coord: Coordinates) -> None:
        if not (0 <= coord.column < self.size and 0 <= coord.row < self.size):
            raise IndexError(
                f"{coord} is outside a {self.size}×{self.size} grid."
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, values={self.flat()})"
