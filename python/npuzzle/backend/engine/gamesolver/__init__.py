from npuzzle.backend.engine.gamesolver.solver import Solver, SolverState

__all__ = ["Solver", "SolverState"]
