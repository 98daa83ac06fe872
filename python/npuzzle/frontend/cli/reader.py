"""Loads puzzle files written as ``n`` followed by ``n²`` row-major tiles."""

from __future__ import annotations

import logging
from pathlib import Path

from npuzzle.backend.models.board import Board
from npuzzle.backend.models.errors import InvalidArgument

logger = logging.getLogger(__name__)


def load_board(path: Path) -> Board:
    """Read *path* and return the board it describes."""
    try:
        text = path.read_text()
    except OSError as exc:
        raise InvalidArgument(f"Cannot read puzzle file {path}: {exc.strerror}") from exc

    board = Board.from_text(text)
    logger.debug("Loaded %d×%d board from %s", board.size, board.size, path)
    return board
