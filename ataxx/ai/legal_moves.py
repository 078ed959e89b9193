"""Legal move generation for the side to move."""
from typing import List

from .constants import COLUMNS, MAX_MOVE_DISTANCE, ROWS
from .move import Move, is_on_board

_OFFSETS = range(-MAX_MOVE_DISTANCE, MAX_MOVE_DISTANCE + 1)


def _candidate_moves(col, row):
    moves = []
    for dc in _OFFSETS:
        for dr in _OFFSETS:
            if dc == 0 and dr == 0:
                continue
            col1 = chr(ord(col) + dc)
            row1 = chr(ord(row) + dr)
            if is_on_board(col1, row1):
                moves.append(Move(col, row, col1, row1))
    return tuple(moves)


# Every on-board move from every cell, in the order find_legal_moves tries them
_CANDIDATES = [(col, row, _candidate_moves(col, row)) for col in COLUMNS for row in ROWS]


def find_legal_moves(board) -> List[Move]:
    """Return every legal move for the side to move on BOARD.

    Cells are scanned column by column ('a'..'g'), and within a column by row
    ('1'..'7'). From each of the mover's pieces, the 24 destinations within
    two cells are tried in order of column offset, then row offset. The order
    matters: the search keeps the first of several equally scored moves.
    Column offset before row offset is the order of the engine this AI
    reproduces, kept on purpose so that both pick the same move.

    Returns [Move.PASS] when there is nothing else to play; never an empty list.
    """
    legal_moves = []
    color = board.whose_move
    for col, row, candidates in _CANDIDATES:
        if board.get(col, row) != color:
            continue
        for move in candidates:
            if board.is_legal(col, row, move.col1, move.row1):
                legal_moves.append(move)

    if not legal_moves:
        legal_moves.append(Move.PASS)
    return legal_moves
