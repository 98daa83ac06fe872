"""CLI tests: the typer app driven through ``CliRunner``."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle.backend.engine.gamesolver import Solver
from npuzzle.backend.models.board import Board
from npuzzle.backend.models.errors import InvalidArgument
from npuzzle.frontend.cli.reader import load_board
from npuzzle.frontend.cli.vanilla.app import render
from npuzzle.main import app

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

runner = CliRunner()


def _fixture(name: str) -> str:
    return str(FIXTURES_DIR / name)


# -- vanilla frontend ---------------------------------------------------------


def test_vanilla_solvable() -> None:
    result = runner.invoke(app, [_fixture("puzzle3x3-04.txt")])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("Minimum number of moves = 4\n")
    assert result.output.count("3\n") == 5
    assert result.output.endswith(" 1  2  3 \n 4  5  6 \n 7  8  0 \n\n")


def test_vanilla_unsolvable() -> None:
    result = runner.invoke(app, [_fixture("puzzle3x3-unsolvable.txt")])

    assert result.exit_code == 0, result.output
    assert result.output == "No solution possible\n"


def test_render_lists_every_board() -> None:
    board = Board([[1, 2], [0, 3]])
    text = render(Solver(board))

    assert text == (
        "Minimum number of moves = 1\n"
        "2\n 1  2 \n 0  3 \n\n"
        "2\n 1  2 \n 3  0 \n\n"
    )


# -- rich frontend ------------------------------------------------------------


def test_rich_solvable() -> None:
    result = runner.invoke(app, [_fixture("puzzle2x2-01.txt"), "-f", "rich"])

    assert result.exit_code == 0, result.output
    assert "Solved" in result.output
    assert "Minimum number of moves = 1" in result.output


def test_rich_unsolvable_from_env() -> None:
    result = runner.invoke(
        app,
        [_fixture("puzzle2x2-unsolvable.txt")],
        env={"NPUZZLE_FRONTEND": "rich"},
    )

    assert result.exit_code == 0, result.output
    assert "No solution possible" in result.output
    assert "Unsolvable" in result.output


def test_unknown_frontend_is_usage_error() -> None:
    result = runner.invoke(app, [_fixture("puzzle2x2-01.txt"), "-f", "pygame"])
    assert result.exit_code == 2


# -- random boards ------------------------------------------------------------


def test_random_board() -> None:
    result = runner.invoke(app, ["--random", "3", "--seed", "5"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("Minimum number of moves = ")


def test_random_size_is_bounded() -> None:
    result = runner.invoke(app, ["--random", "9"])
    assert result.exit_code == 2


# -- input errors -------------------------------------------------------------


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["missing-puzzle.txt"],
        ["puzzle2x2-01.txt", "--random", "3"],
    ],
    ids=["no-input", "missing-file", "file-and-random"],
)
def test_input_errors_exit_1(args: list[str]) -> None:
    args = [_fixture(a) if a.endswith(".txt") else a for a in args]
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_malformed_file_exits_1(tmp_path: Path) -> None:
    puzzle = tmp_path / "bad.txt"
    puzzle.write_text("3\n1 2 3\n4 5 6\n7 8 8\n")
    result = runner.invoke(app, [str(puzzle)])

    assert result.exit_code == 1
    assert "permutation" in result.output


# -- reader -------------------------------------------------------------------


def test_load_board(tmp_path: Path) -> None:
    puzzle = tmp_path / "p.txt"
    puzzle.write_text("2\n1 2\n3 0\n")
    assert load_board(puzzle) == Board([[1, 2], [3, 0]])


def test_load_board_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgument):
        load_board(tmp_path / "nope.txt")
