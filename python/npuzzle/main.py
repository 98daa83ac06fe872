"""Sliding Puzzle Solver.

Usage::

    npuzzle puzzle04.txt              # plain text report
    npuzzle puzzle04.txt -f rich      # Rich terminal tables
    npuzzle --random 3 --seed 7       # solve a random 3×3 board
    npuzzle puzzle04.txt -v           # with debug logging
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from npuzzle.backend.engine.gamegenerator import GameGenerator
from npuzzle.backend.engine.gamesolver import Solver
from npuzzle.backend.models.board import Board
from npuzzle.backend.models.errors import InvalidArgument
from npuzzle.frontend.cli.reader import load_board

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _initial_board(puzzle: Path | None, random_size: int | None, seed: int | None) -> Board:
    if (puzzle is None) == (random_size is None):
        raise InvalidArgument("Give exactly one of PUZZLE_FILE or --random.")
    if puzzle is not None:
        return load_board(puzzle)
    board = GameGenerator.generate(random_size, seed=seed)
    logger.debug("Generated %d×%d board (seed=%s)", random_size, random_size, seed)
    return board


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Optional[Path] = typer.Argument(
        None,
        metavar="PUZZLE_FILE",
        help="Puzzle file: n followed by n² tiles, 0 for the blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="NPUZZLE_FRONTEND",
        help="How to print the result.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "--random",
        min=2, max=4,
        help="Solve a random solvable board of this size instead of a file.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Solve a sliding puzzle with A* search."""
    _configure_logging(verbose)

    try:
        board = _initial_board(puzzle, random_size, seed)
    except InvalidArgument as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    solver = Solver(board)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver=solver)


if __name__ == "__main__":
    app()
