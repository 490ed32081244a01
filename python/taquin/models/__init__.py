from taquin.models.commands import Command, Direction, MovePressed, ShufflePressed
from taquin.models.grid import Coordinates, Grid, InvalidSize, TaquinError
from taquin.models.transitions import Shuffled, Solved, TileMoved, Transition

__all__ = [
    "Command",
    "Coordinates",
    "Direction",
    "Grid",
    "InvalidSize",
    "MovePressed",
    "ShufflePressed",
    "Shuffled",
    "Solved",
    "TaquinError",
    "TileMoved",
    "Transition",
]
