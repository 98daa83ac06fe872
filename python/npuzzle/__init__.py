"""A* sliding puzzle solver with twin-board unsolvability detection."""

__version__ = "1.0.0"
