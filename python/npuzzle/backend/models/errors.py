"""Exceptions shared by the board model, the solver, and the CLI."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a board, grid, or solver input is malformed or missing."""
