"""Sliding puzzle solver.

A* search ordered by ``moves + manhattan``, run in lockstep with a second
search rooted at the board's twin. Exactly one of the two boards can reach
the goal, so whichever search gets there first settles solvability.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from npuzzle.backend.models.board import Board
from npuzzle.backend.models.errors import InvalidArgument

logger = logging.getLogger(__name__)


class SolverState(StrEnum):
    SEARCHING = "searching"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class _SearchNode:
    board: Board
    moves: int
    previous: Optional[_SearchNode] = None
    priority: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", self.moves + self.board.manhattan())


# Heap entries are (priority, insertion order, node); the counter keeps
# equal-priority nodes in FIFO order and stops comparison reaching the node.
_HeapEntry = tuple[int, int, _SearchNode]


class Solver:
    """Finds a minimum-move solution for a board, or proves there is none.

    The search runs to completion inside the constructor; the query
    methods only read the recorded outcome.
    """

    def __init__(self, initial: Board) -> None:
        if initial is None:
            raise InvalidArgument("Initial board cannot be None.")
        if not isinstance(initial, Board):
            raise InvalidArgument(
                f"Initial board must be a Board, got {type(initial).__name__}."
            )

        self.initial = initial
        self.state = SolverState.SEARCHING
        self.expanded: int = 0
        self._goal: _SearchNode | None = None
        self._counter = itertools.count()

        self._search()

    # -- search ---------------------------------------------------------------

    def _search(self) -> None:
        main_heap: list[_HeapEntry] = []
        twin_heap: list[_HeapEntry] = []
        self._push(main_heap, _SearchNode(self.initial, 0))
        self._push(twin_heap, _SearchNode(self.initial.twin(), 0))

        while self.state is SolverState.SEARCHING:
            goal = self._step(main_heap)
            if goal is not None:
                self._goal = goal
                self.state = SolverState.SOLVED
                break

            if self._step(twin_heap) is not None:
                self.state = SolverState.UNSOLVABLE

        logger.debug(
            "Search finished: %s (moves=%d, expanded=%d, size=%d)",
            self.state.value,
            self.moves(),
            self.expanded,
            self.initial.size,
        )

    def _step(self, heap: list[_HeapEntry]) -> _SearchNode | None:
        """Pop one node; return it if it is the goal, otherwise expand it."""
        if not heap:
            return None

        _, _, node = heapq.heappop(heap)
        if node.board.is_goal():
            return node

        self.expanded += 1
        previous_board = node.previous.board if node.previous is not None else None
        for neighbor in node.board.neighbors():
            # Only the immediate predecessor is pruned, not older ancestors.
            if neighbor != previous_board:
                self._push(heap, _SearchNode(neighbor, node.moves + 1, node))
        return None

    def _push(self, heap: list[_HeapEntry], node: _SearchNode) -> None:
        heapq.heappush(heap, (node.priority, next(self._counter), node))

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        """Return True if the initial board can reach the goal state."""
        return self.state is SolverState.SOLVED

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board, or -1."""
        if self._goal is None:
            return -1
        return self._goal.moves

    def solution(self) -> list[Board] | None:
        """Return the boards from the initial board to the goal, or ``None``."""
        if self._goal is None:
            return None

        path: list[Board] = []
        node: _SearchNode | None = self._goal
        while node is not None:
            path.append(node.board)
            node = node.previous
        path.reverse()
        return path

    def hint(self) -> Board | None:
        """Return the next board on the solution, or ``None`` if solved / unsolvable."""
        path = self.solution()
        if path is None or len(path) < 2:
            return None
        return path[1]
