"""
Move representation for Ataxx.

A move is either a transition from one cell to another (an extend when the
cells are adjacent, a jump when they are two apart) or the pass move, used
when the side to move has no other option.
"""
import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .constants import COLUMNS, ROWS

_MOVE_PATTERN = re.compile(r"^\s*([a-g])([1-7])\s*-\s*([a-g])([1-7])\s*$")
CELL_PATTERN = re.compile(r"^([a-g])([1-7])$")


@dataclass(frozen=True)
class Move:
    """An immutable Ataxx move, compared by its fields.

    Cells are given as a column letter ('a'..'g') and a row digit ('1'..'7').
    The pass move has all four fields empty.
    """
    col0: str = ""
    row0: str = ""
    col1: str = ""
    row1: str = ""

    PASS: ClassVar[Optional["Move"]] = None

    @classmethod
    def parse(cls, text):
        """Parse a move written as 'c3-d4', or '-' for a pass.

        Raises:
            ValueError: If TEXT is not a well-formed move.
        """
        if text is None:
            raise ValueError("Empty move")
        if text.strip() == "-":
            return cls.PASS
        match = _MOVE_PATTERN.match(text.lower())
        if match is None:
            raise ValueError(f"Invalid move: {text!r}")
        return cls(*match.groups())

    @property
    def is_pass(self):
        return not (self.col0 or self.row0 or self.col1 or self.row1)

    @property
    def col_distance(self):
        return abs(ord(self.col1) - ord(self.col0))

    @property
    def row_distance(self):
        return abs(ord(self.row1) - ord(self.row0))

    @property
    def distance(self):
        if self.is_pass:
            return 0
        return max(self.col_distance, self.row_distance)

    @property
    def is_extend(self):
        return not self.is_pass and self.distance == 1

    @property
    def is_jump(self):
        return not self.is_pass and self.distance == 2

    @property
    def source(self):
        return self.col0 + self.row0

    @property
    def destination(self):
        return self.col1 + self.row1

    def __str__(self):
        if self.is_pass:
            return "-"
        return f"{self.source}-{self.destination}"


Move.PASS = Move()


def is_on_board(col, row):
    """True iff COL and ROW name a cell of the board."""
    return len(col) == 1 and len(row) == 1 and col in COLUMNS and row in ROWS
