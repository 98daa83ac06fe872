"""Generates sliding puzzle boards for the solver."""

from __future__ import annotations

import random

from npuzzle.backend.models.board import Board
from npuzzle.backend.models.errors import InvalidArgument


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 2:
            raise InvalidArgument(f"Board dimension must be at least 2, got {size}.")
        flat = list(range(1, size * size)) + [0]
        return Board.from_flat(size, flat)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return the board reached after *steps* random blank moves.

        The walk never immediately undoes its previous move, and every board
        it reaches is solvable whenever the start board is.
        """
        rng = rng or random.Random()
        previous: Board | None = None

        for _ in range(steps):
            candidates = [b for b in board.neighbors() if b != previous]
            previous, board = board, rng.choice(candidates)
        return board

    @staticmethod
    def generate(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size.

        *steps* defaults to ``size * 10``, which keeps 3×3 and 4×4 boards
        within easy reach of the solver.
        """
        rng = random.Random(seed)
        if steps is None:
            steps = size * 10

        goal = GameGenerator.solved(size)
        board = GameGenerator.scramble(goal, steps, rng)

        # Ensure the board is not already solved
        if board.is_goal():
            board = GameGenerator.scramble(board, 1, rng)
        return board

    @staticmethod
    def generate_unsolvable(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random board that cannot reach the goal state."""
        return GameGenerator.generate(size, steps, seed).twin()
