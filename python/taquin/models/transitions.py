"""Transitions emitted by the engine, consumed by presentation collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from taquin.models.grid import Coordinates


@dataclass(frozen=True)
class Shuffled:
    """The grid contents were replaced."""


@dataclass(frozen=True)
class TileMoved:
    """Tile *value* slid from *source* into the empty slot at *target*."""

    value: int
    source: Coordinates
    target: Coordinates


@dataclass(frozen=True)
class Solved:
    """The grid reached ascending order.

    ``celebrate`` is only set when the solve follows a shuffle, so the
    initial ordered grid never triggers the completion cue.
    """

    celebrate: bool = False


Transition = Shuffled | TileMoved | Solved
