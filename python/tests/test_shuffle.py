"""Shuffle engine tests — every accepted grid is solvable and unsolved."""

from __future__ import annotations

import random

import pytest

from taquin.engine.gamegenerator import ShuffleEngine, ShuffleExhausted
from taquin.engine.gamesolver import SolvabilityOracle
from taquin.models.grid import Coordinates, Grid, TaquinError


@pytest.mark.parametrize("size", [2, 3, 4, 5])
@pytest.mark.parametrize("seed", range(8))
def test_shuffled_grid_is_solvable_and_unsolved(size: int, seed: int) -> None:
    grid = Grid(size)

    attempts = ShuffleEngine(random.Random(seed)).shuffle(grid)

    assert attempts >= 1
    assert not grid.is_solved()
    assert SolvabilityOracle.is_solvable(grid)
    assert sorted(grid.flat()) == list(range(1, size * size + 1))
    assert grid.value_at(grid.empty_coordinates()) == grid.sentinel


def test_same_seed_same_arrangement() -> None:
    first, second = Grid(4), Grid(4)

    ShuffleEngine(random.Random(7)).shuffle(first)
    ShuffleEngine(random.Random(7)).shuffle(second)

    assert first == second


def test_rejected_candidates_are_reshuffled_from_current_grid(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    engine = ShuffleEngine(random.Random(0))
    calls: list[list[int]] = []

    def scripted(grid: Grid) -> None:
        calls.append(grid.flat())
        if len(calls) == 2:
            # [2, 1, 3, 4]: one inversion, blank on the bottom row.
            grid.swap(Coordinates(0, 0), Coordinates(1, 0))
        elif len(calls) == 3:
            # [1, 2, 4, 3]: blank slid left, solvable.
            grid.swap(Coordinates(0, 0), Coordinates(1, 0))
            grid.swap(Coordinates(0, 1), Coordinates(1, 1))

    monkeypatch.setattr(engine, "_scramble", scripted)
    grid = Grid(2)

    assert engine.shuffle(grid) == 3
    assert calls == [[1, 2, 3, 4], [1, 2, 3, 4], [2, 1, 3, 4]]
    assert grid.flat() == [1, 2, 4, 3]


def test_exhausted_budget_raises() -> None:
    engine = ShuffleEngine(random.Random(0), max_attempts=0)

    with pytest.raises(ShuffleExhausted):
        engine.shuffle(Grid(3))
    assert issubclass(ShuffleExhausted, TaquinError)
