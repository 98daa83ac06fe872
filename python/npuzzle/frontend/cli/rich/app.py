"""Rich terminal frontend: styled tables in panels.

Uses the ``rich`` library for styled output while sharing the same
solver result as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.backend.engine.gamesolver import Solver
from npuzzle.backend.models.board import Board


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        title=title,
        title_style="dim",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- result screens -----------------------------------------------------------


def _unsolvable_panel(solver: Solver) -> Panel:
    size = solver.initial.size
    body = Group(
        Align.center(_render_board(solver.initial)),
        Align.center(Text("\nNo solution possible", style="bold red")),
    )
    return Panel(
        body,
        title=f"[bold red]Unsolvable  {size}×{size}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )


def _solution_panel(solver: Solver) -> Panel:
    size = solver.initial.size
    boards = solver.solution() or []

    stats = Text()
    stats.append("Minimum number of moves = ", style="dim")
    stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solver.expanded), style="bold yellow")

    steps = Columns(
        [_render_board(b, title=f"move {i}") for i, b in enumerate(boards)],
        padding=(0, 2),
    )

    return Panel(
        Group(Align.center(stats), Text(""), steps),
        title=f"[bold green]Solved  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )


# -- public entry point -------------------------------------------------------


def run(solver: Solver, console: Console | None = None) -> None:
    """Print the solver result as Rich panels."""
    console = console or Console()
    if solver.is_solvable():
        panel = _solution_panel(solver)
    else:
        panel = _unsolvable_panel(solver)
    console.print()
    console.print(panel)
