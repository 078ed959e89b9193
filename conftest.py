import pytest

from ataxx.ai.board import Board
from ataxx.ai.constants import BOARD_SIZE, COLUMNS, ROWS


def grid_with(cells):
    """Return a grid (row '7' first) holding CELLS, a dict like {"a1": "red"}."""
    grid = [["empty"] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for cell, piece in cells.items():
        col, row = cell
        grid[len(ROWS) - 1 - ROWS.index(row)][COLUMNS.index(col)] = piece
    return grid


def board_with(cells, whose_move="red"):
    return Board.from_grid(grid_with(cells), whose_move)


@pytest.fixture
def make_board():
    return board_with


@pytest.fixture
def make_grid():
    return grid_with


@pytest.fixture
def blocked_red_cells():
    """Red's only piece at a1 is walled in by blue; blue can still move."""
    cells = {"a1": "red"}
    for cell in ("a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"):
        cells[cell] = "blue"
    return cells
