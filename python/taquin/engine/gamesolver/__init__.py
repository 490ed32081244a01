from taquin.engine.gamesolver.oracle import SolvabilityOracle

__all__ = ["SolvabilityOracle"]
