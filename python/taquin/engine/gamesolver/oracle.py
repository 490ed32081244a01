"""Solvability test for taquin grids."""

from __future__ import annotations

from taquin.models.grid import Grid


class SolvabilityOracle:
    """Stateless oracle — all methods are static."""

    @staticmethod
    def inversion_count(grid: Grid) -> int:
        """Count out-of-order pairs in the row-major reading, blank excluded."""
        values = [v for v in grid.flat() if v != grid.sentinel]
        count = 0
        for i, earlier in enumerate(values):
            for later in values[i + 1 :]:
                if earlier > later:
                    count += 1
        return count

    @staticmethod
    def is_solvable(grid: Grid) -> bool:
        """Return True if *grid* can reach the ascending order by slides.

        Odd sizes only depend on the inversion parity.  Even sizes also
        depend on the blank row, counted from the top: the two parities
        must differ.
        """
        even_inversions = SolvabilityOracle.inversion_count(grid) % 2 == 0
        if grid.size % 2 == 1:
            return even_inversions

        blank_row_even = grid.empty_coordinates().row % 2 == 0
        return even_inversions != blank_row_even
