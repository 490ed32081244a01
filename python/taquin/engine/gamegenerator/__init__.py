from taquin.engine.gamegenerator.shuffle import ShuffleEngine, ShuffleExhausted

__all__ = ["ShuffleEngine", "ShuffleExhausted"]
