"""Selection cursor tests — wraparound and hopping over the blank."""

from __future__ import annotations

import random

import pytest

from taquin.engine.gamegenerator import ShuffleEngine
from taquin.engine.gameplay import SelectionCursor
from taquin.engine.gamestate import PuzzleState
from taquin.models.commands import Direction
from taquin.models.grid import Coordinates


# -- helpers ------------------------------------------------------------------


def _cursor(size: int = 3, selected: Coordinates = Coordinates(0, 0)) -> SelectionCursor:
    state = PuzzleState(size)
    state.selected = selected
    return SelectionCursor(state)


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        (Coordinates(0, 0), Direction.RIGHT, Coordinates(1, 0)),
        (Coordinates(1, 1), Direction.LEFT, Coordinates(0, 1)),
        (Coordinates(1, 1), Direction.UP, Coordinates(1, 0)),
        (Coordinates(1, 1), Direction.DOWN, Coordinates(1, 2)),
        (Coordinates(0, 0), Direction.LEFT, Coordinates(2, 0)),
        (Coordinates(2, 0), Direction.RIGHT, Coordinates(0, 0)),
        (Coordinates(0, 0), Direction.UP, Coordinates(0, 2)),
        (Coordinates(0, 2), Direction.DOWN, Coordinates(0, 0)),
    ],
)
def test_step_moves_one_cell_with_wraparound(
    start: Coordinates, direction: Direction, expected: Coordinates
) -> None:
    cursor = _cursor(selected=start)

    assert cursor.step(direction) == expected
    assert cursor.state.selected == expected


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        (Coordinates(2, 1), Direction.DOWN, Coordinates(2, 0)),
        (Coordinates(1, 2), Direction.RIGHT, Coordinates(0, 2)),
        (Coordinates(0, 2), Direction.LEFT, Coordinates(1, 2)),
        (Coordinates(2, 0), Direction.UP, Coordinates(2, 1)),
    ],
)
def test_step_hops_over_the_blank(
    start: Coordinates, direction: Direction, expected: Coordinates
) -> None:
    # Solved 3×3: the blank sits at (2, 2).
    cursor = _cursor(selected=start)

    assert cursor.step(direction) == expected


def test_two_by_two_hop_can_return_to_start() -> None:
    cursor = _cursor(size=2, selected=Coordinates(1, 0))

    assert cursor.step(Direction.DOWN) == Coordinates(1, 0)


@pytest.mark.parametrize("seed", range(5))
def test_step_never_lands_on_the_blank(seed: int) -> None:
    state = PuzzleState(4)
    ShuffleEngine(random.Random(seed)).shuffle(state.grid)
    cursor = SelectionCursor(state)
    rng = random.Random(seed)
    state.selected = next(
        Coordinates(c, r)
        for r in range(4)
        for c in range(4)
        if not state.grid.is_empty(Coordinates(c, r))
    )

    for _ in range(200):
        landed = cursor.step(rng.choice(list(Direction)))
        assert landed != state.grid.empty_coordinates()


def test_selecting_the_blank_directly_is_refused() -> None:
    state = PuzzleState(3)

    with pytest.raises(ValueError, match="empty slot"):
        state.selected = Coordinates(2, 2)
