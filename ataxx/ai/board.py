#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Board module for Ataxx.

This module owns the game state (cell contents, side to move, consecutive
jump count, move history) and the rules of the game: move legality, move
application with piece flipping, block placement and win detection. The AI
treats a Board as a cloneable position and never mutates one shared across
search branches.
"""
from typing import List, Optional

from .constants import BOARD_SIZE, COLUMNS, ROWS, JUMP_LIMIT, MAX_MOVE_DISTANCE, Piece
from .move import Move

_PIECES = tuple(Piece)
_EMPTY, _RED, _BLUE, _BLOCK = (int(piece) for piece in _PIECES)
_NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# (column letter, row digit) -> index into Board._cells
_CELL_INDEX = {
    (col, row): r * BOARD_SIZE + c
    for r, row in enumerate(ROWS)
    for c, col in enumerate(COLUMNS)
}


def _cells_within(index, distance):
    r, c = divmod(index, BOARD_SIZE)
    return tuple(
        nr * BOARD_SIZE + nc
        for nr in range(max(0, r - distance), min(BOARD_SIZE, r + distance + 1))
        for nc in range(max(0, c - distance), min(BOARD_SIZE, c + distance + 1))
        if (nr, nc) != (r, c)
    )


# Cells one step away (flip targets) and up to MAX_MOVE_DISTANCE away (move targets)
_NEIGHBORS = tuple(_cells_within(index, 1) for index in range(_NUM_CELLS))
_NEIGHBOR_SETS = tuple(frozenset(cells) for cells in _NEIGHBORS)
_REACH = tuple(_cells_within(index, MAX_MOVE_DISTANCE) for index in range(_NUM_CELLS))
_REACH_SETS = tuple(frozenset(cells) for cells in _REACH)

_UNKNOWN = object()


class IllegalMoveError(ValueError):
    """Raised when a move or block placement breaks the rules."""


class Board:
    """Game state representation for Ataxx.

    Cells are kept in a flat list of Piece values, row '1' first, so that
    cell (col, row) lives at index row * BOARD_SIZE + col. Piece counts are
    kept up to date as moves are made, and the winner is computed at most
    once per position.
    """

    def __init__(self):
        """Initialize a board holding the standard starting position."""
        self.clear()

    def clear(self):
        """Reset to the starting position: red at a1 and g7, blue at a7 and g1."""
        self._cells = [_EMPTY] * _NUM_CELLS
        self._cells[_CELL_INDEX["a", "1"]] = self._cells[_CELL_INDEX["g", "7"]] = _RED
        self._cells[_CELL_INDEX["a", "7"]] = self._cells[_CELL_INDEX["g", "1"]] = _BLUE
        self._turn = _RED
        self._num_jumps = 0
        self._moves = ()
        self._recount()

    def _recount(self):
        self._counts = [self._cells.count(piece) for piece in range(len(_PIECES))]
        self._winner = _UNKNOWN

    def copy(self) -> "Board":
        """Return a copy of this board that can be changed independently.

        The move history is an immutable tuple, so both boards share it.
        """
        new_board = Board.__new__(Board)
        new_board._cells = self._cells[:]
        new_board._counts = self._counts[:]
        new_board._turn = self._turn
        new_board._num_jumps = self._num_jumps
        new_board._moves = self._moves
        new_board._winner = self._winner
        return new_board

    @classmethod
    def from_grid(cls, grid, whose_move) -> "Board":
        """Build a board from rows of cell names.

        Args:
            grid: BOARD_SIZE rows of BOARD_SIZE strings ("red", "blue",
                "empty" or "block"). The first row is row '7'.
            whose_move: Side to move, a Piece or its name.

        Raises:
            ValueError: If the grid or the side to move is malformed.
        """
        if not isinstance(grid, (list, tuple)) or len(grid) != BOARD_SIZE:
            raise ValueError("Invalid board")
        for row in grid:
            if not isinstance(row, (list, tuple)) or len(row) != BOARD_SIZE:
                raise ValueError("Invalid board")
        if not isinstance(whose_move, Piece):
            whose_move = Piece.from_name(whose_move)
        if whose_move not in (Piece.RED, Piece.BLUE):
            raise ValueError(f"Invalid player: {whose_move}")

        board = cls.__new__(cls)
        board._cells = [int(Piece.from_name(cell)) for row in reversed(grid) for cell in row]
        board._turn = int(whose_move)
        board._num_jumps = 0
        board._moves = ()
        board._recount()
        return board

    def to_grid(self) -> List[List[str]]:
        """Return the rows of cell names, row '7' first."""
        names = [piece.name.lower() for piece in _PIECES]
        return [
            [names[cell] for cell in self._cells[start:start + BOARD_SIZE]]
            for start in reversed(range(0, _NUM_CELLS, BOARD_SIZE))
        ]

    def get(self, col, row) -> Piece:
        """Return the contents of cell COL ROW. Off-board cells read as blocks."""
        index = _CELL_INDEX.get((col, row))
        if index is None:
            return Piece.BLOCK
        return _PIECES[self._cells[index]]

    @property
    def whose_move(self) -> Piece:
        return _PIECES[self._turn]

    @property
    def num_jumps(self):
        """Number of consecutive jumps ending with the last move."""
        return self._num_jumps

    @property
    def num_moves(self):
        return len(self._moves)

    @property
    def moves(self) -> List[Move]:
        return list(self._moves)

    def num_pieces(self, color) -> int:
        return self._counts[color]

    @property
    def red_pieces(self):
        return self._counts[_RED]

    @property
    def blue_pieces(self):
        return self._counts[_BLUE]

    def is_legal(self, col0, row0, col1, row1) -> bool:
        """True iff moving from COL0 ROW0 to COL1 ROW1 is legal for the side to move."""
        source = _CELL_INDEX.get((col0, row0))
        target = _CELL_INDEX.get((col1, row1))
        if source is None or target is None:
            return False
        cells = self._cells
        return cells[source] == self._turn and cells[target] == _EMPTY and target in _REACH_SETS[source]

    def is_legal_move(self, move: Optional[Move]) -> bool:
        """True iff MOVE may be played on this board.

        A pass is legal only when the side to move has no other move.
        """
        if move is None:
            return False
        if move.is_pass:
            return not self.can_move(self._turn)
        return self.is_legal(move.col0, move.row0, move.col1, move.row1)

    def can_move(self, color) -> bool:
        """True iff COLOR has at least one non-pass move on this board."""
        color = int(color)
        cells = self._cells
        for index, piece in enumerate(cells):
            if piece == color:
                for target in _REACH[index]:
                    if cells[target] == _EMPTY:
                        return True
        return False

    def make_move(self, move: Move) -> None:
        """Play MOVE for the side to move and pass the turn to the opponent.

        Raises:
            IllegalMoveError: If MOVE is not legal on this board.
        """
        if not self.is_legal_move(move):
            raise IllegalMoveError(f"Illegal move: {move}")
        self.apply_move(move)

    def apply_move(self, move: Move) -> None:
        """Play MOVE without checking it.

        Only for callers that have just seen is_legal_move(MOVE) accept it on
        this board, such as the search.
        """
        color = self._turn
        opponent = _RED + _BLUE - color
        self._moves = self._moves + (move,)
        self._turn = opponent
        self._winner = _UNKNOWN
        if move.is_pass:
            return

        cells = self._cells
        counts = self._counts
        source = _CELL_INDEX[move.col0, move.row0]
        target = _CELL_INDEX[move.col1, move.row1]
        cells[target] = color
        counts[color] += 1
        counts[_EMPTY] -= 1
        if target in _NEIGHBOR_SETS[source]:
            self._num_jumps = 0
        else:
            cells[source] = _EMPTY
            counts[color] -= 1
            counts[_EMPTY] += 1
            self._num_jumps += 1

        flipped = 0
        for index in _NEIGHBORS[target]:
            if cells[index] == opponent:
                cells[index] = color
                flipped += 1
        counts[color] += flipped
        counts[opponent] -= flipped

    def set_block(self, col, row) -> None:
        """Place a block at COL ROW and at its reflections across both axes.

        Raises:
            IllegalMoveError: If a move has been made or a target cell holds a piece.
        """
        if (col, row) not in _CELL_INDEX:
            raise IllegalMoveError(f"Invalid cell: {col}{row}")
        if self._moves:
            raise IllegalMoveError("Blocks may only be placed before the first move")
        mirror_col = COLUMNS[len(COLUMNS) - 1 - COLUMNS.index(col)]
        mirror_row = ROWS[len(ROWS) - 1 - ROWS.index(row)]
        cells = {(col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)}
        for c, r in cells:
            if self.get(c, r) not in (Piece.EMPTY, Piece.BLOCK):
                raise IllegalMoveError(f"Cannot place a block on {c}{r}")
        for cell in cells:
            self._cells[_CELL_INDEX[cell]] = _BLOCK
        self._recount()

    def get_winner(self) -> Optional[Piece]:
        """Return the winner if the game is decided, else None.

        Returns:
            Piece.RED or Piece.BLUE for a win, Piece.EMPTY for a draw, or
            None while the game is still in progress.
        """
        if self._winner is _UNKNOWN:
            self._winner = self._find_winner()
        return self._winner

    def _find_winner(self):
        red = self._counts[_RED]
        blue = self._counts[_BLUE]
        if (red > 0 and blue > 0 and self._num_jumps < JUMP_LIMIT
                and (self.can_move(_RED) or self.can_move(_BLUE))):
            return None
        if red > blue:
            return Piece.RED
        if blue > red:
            return Piece.BLUE
        return Piece.EMPTY

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._turn == other._turn
                and self._num_jumps == other._num_jumps
                and self._cells == other._cells)

    __hash__ = None

    def __str__(self):
        lines = ["==="]
        for row in reversed(ROWS):
            lines.append("  " + " ".join(self.get(col, row).symbol for col in COLUMNS))
        lines.append("===")
        return "\n".join(lines)
