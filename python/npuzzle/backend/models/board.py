"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from npuzzle.backend.models.errors import InvalidArgument

# Blank moves in neighbor order: up, down, left, right.
_BLANK_MOVES: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Board:
    """Immutable n×n sliding puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Two boards compare equal when their grids are identical; ``size`` and
    ``blank_pos`` are derived from ``tiles`` and take no part in comparison.
    """

    tiles: tuple[tuple[int, ...], ...]
    size: int = field(init=False, compare=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        tiles = _normalise(self.tiles)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "size", len(tiles))
        object.__setattr__(self, "blank_pos", _locate_blank(tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidArgument(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size)))

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a board written as ``n`` followed by ``n²`` row-major tiles.

        Whitespace (including newlines) separates tokens, so the output of
        ``str(board)`` parses back into an equal board.
        """
        tokens = text.split()
        if not tokens:
            raise InvalidArgument("Puzzle text is empty.")
        try:
            values = [int(tok) for tok in tokens]
        except ValueError as exc:
            raise InvalidArgument(f"Puzzle text contains a non-integer token: {exc}") from exc
        size, flat = values[0], values[1:]
        if size < 2:
            raise InvalidArgument(f"Board dimension must be at least 2, got {size}.")
        return cls.from_flat(size, flat)

    def to_grid(self) -> list[list[int]]:
        """Return a mutable copy of the tiles as a list of rows."""
        return [list(row) for row in self.tiles]

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def hamming(self) -> int:
        """Number of non-blank tiles that are out of place."""
        n = self.size
        count = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val != 0 and val != r * n + c + 1:
                    count += 1
        return count

    def manhattan(self) -> int:
        """Sum of the city-block distances from each tile to its goal cell."""
        n = self.size
        dist = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_row, goal_col = divmod(val - 1, n)
                dist += abs(r - goal_row) + abs(c - goal_col)
        return dist

    def is_goal(self) -> bool:
        return self.hamming() == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> Iterator[Board]:
        """Yield every board reachable by sliding one tile into the blank.

        Boards are produced lazily in blank-move order: up, down, left, right.
        """
        br, bc = self.blank_pos
        for dr, dc in _BLANK_MOVES:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield self._swapped((br, bc), (nr, nc))

    def twin(self) -> Board:
        """Return the board with one pair of non-blank tiles exchanged.

        Swaps the first two cells of row 0 when neither is the blank,
        otherwise the first two cells of row 1. Exactly one of a board and
        its twin can reach the goal.
        """
        if self.tiles[0][0] != 0 and self.tiles[0][1] != 0:
            return self._swapped((0, 0), (0, 1))
        return self._swapped((1, 0), (1, 1))

    def _swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        grid = self.to_grid()
        (ar, ac), (br, bc) = a, b
        grid[ar][ac], grid[br][bc] = grid[br][bc], grid[ar][ac]
        return Board(grid)

    # -- text form ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append("".join(f"{val:2d} " for val in row))
        return "\n".join(lines) + "\n"


# -- validation ---------------------------------------------------------------


def _normalise(tiles: object) -> tuple[tuple[int, ...], ...]:
    """Copy *tiles* into a tuple grid, rejecting anything but an n×n permutation."""
    if tiles is None:
        raise InvalidArgument("Tiles cannot be None.")
    if isinstance(tiles, (str, bytes)) or not isinstance(tiles, Sequence):
        raise InvalidArgument(f"Tiles must be a sequence of rows, got {type(tiles).__name__}.")

    n = len(tiles)
    if n < 2:
        raise InvalidArgument(f"Board dimension must be at least 2, got {n}.")

    rows: list[tuple[int, ...]] = []
    for r, row in enumerate(tiles):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidArgument(f"Row {r} is not a sequence.")
        if len(row) != n:
            raise InvalidArgument(
                f"Board must be square: row {r} has {len(row)} tiles, expected {n}."
            )
        for val in row:
            if isinstance(val, bool) or not isinstance(val, int):
                raise InvalidArgument(f"Tile {val!r} in row {r} is not an integer.")
        rows.append(tuple(row))

    flat = sorted(val for row in rows for val in row)
    if flat != list(range(n * n)):
        raise InvalidArgument(
            f"Tiles must be a permutation of 0..{n * n - 1} with exactly one blank."
        )
    return tuple(rows)


def _locate_blank(tiles: tuple[tuple[int, ...], ...]) -> tuple[int, int]:
    for r, row in enumerate(tiles):
        for c, val in enumerate(row):
            if val == 0:
                return (r, c)
    raise InvalidArgument("Board has no blank tile.")
