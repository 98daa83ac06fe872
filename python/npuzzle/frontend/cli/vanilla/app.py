"""Vanilla terminal frontend: no third-party dependencies.

Prints the solver result as plain text: the move count followed by every
board of the solution, each in the same format puzzle files are read in.
"""

from __future__ import annotations

from npuzzle.backend.engine.gamesolver import Solver


def render(solver: Solver) -> str:
    """Return the full text report for a finished *solver*."""
    if not solver.is_solvable():
        return "No solution possible\n"

    lines = [f"Minimum number of moves = {solver.moves()}"]
    for board in solver.solution() or []:
        lines.append(str(board))
    return "\n".join(lines) + "\n"


def run(solver: Solver) -> None:
    """Print the plain text report for *solver*."""
    print(render(solver), end="")
