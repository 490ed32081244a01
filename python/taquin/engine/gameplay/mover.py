"""Slides the selected tile into the empty slot."""

from __future__ import annotations

import logging

from taquin.engine.gamestate import PuzzleState
from taquin.models.transitions import Solved, TileMoved, Transition

logger = logging.getLogger(__name__)


class MoveExecutor:
    """Applies a single adjacent swap and reports what happened."""

    def __init__(self, state: PuzzleState) -> None:
        self.state = state

    def try_move(self) -> list[Transition]:
        """Swap the selected tile with the blank if they touch.

        Returns the transitions produced, in order: ``TileMoved`` and, when
        the swap completes the puzzle, ``Solved``.  A selection that is not
        4-adjacent to the blank leaves everything untouched and returns an
        empty list.
        """
        state = self.state
        grid = state.grid
        source = state.selected
        target = grid.empty_coordinates()

        if not source.is_adjacent_to(target):
            logger.debug("Ignored move: %s is not next to blank %s", source, target)
            return []

        value = grid.value_at(source)
        grid.swap(source, target)
        # The tile now sits where the blank was; the selection follows it.
        state.selected = target
        logger.debug("Moved tile %d from %s to %s", value, source, target)

        transitions: list[Transition] = [TileMoved(value, source, target)]
        if grid.is_solved():
            celebrate = state.is_shuffled
            state.is_shuffled = False
            logger.info("Puzzle solved (celebrate=%s)", celebrate)
            transitions.append(Solved(celebrate=celebrate))
        return transitions
