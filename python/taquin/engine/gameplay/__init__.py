from taquin.engine.gameplay.cursor import SelectionCursor
from taquin.engine.gameplay.game import DEFAULT_SIZE, Taquin
from taquin.engine.gameplay.mover import MoveExecutor

__all__ = ["DEFAULT_SIZE", "MoveExecutor", "SelectionCursor", "Taquin"]
