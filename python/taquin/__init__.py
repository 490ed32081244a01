"""Sliding-tile puzzle (taquin) engine and terminal frontend."""

from taquin.engine.gameplay import Taquin
from taquin.models import Coordinates, Direction, Grid

__all__ = ["Coordinates", "Direction", "Grid", "Taquin"]

__version__ = "0.1.0"
