from npuzzle.backend.models.board import Board
from npuzzle.backend.models.errors import InvalidArgument

__all__ = ["Board", "InvalidArgument"]
