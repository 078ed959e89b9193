# Ataxx Game Constants
from enum import IntEnum

BOARD_SIZE = 7
COLUMNS = "abcdefg"
ROWS = "1234567"

# Maximum distance a piece may travel (1 = extend, 2 = jump)
MAX_MOVE_DISTANCE = 2

# The game is over after this many consecutive jumps
JUMP_LIMIT = 25

# Search parameters
MAX_DEPTH = 4
INFTY = 2**31 - 1
# A position magnitude indicating a win (for red if positive, blue if negative)
WINNING_VALUE = INFTY - 20


class Piece(IntEnum):
    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCK = 3

    @property
    def opposite(self):
        if self == Piece.RED:
            return Piece.BLUE
        if self == Piece.BLUE:
            return Piece.RED
        return self

    @property
    def symbol(self):
        return PIECE_SYMBOLS[self]

    @classmethod
    def from_name(cls, name):
        try:
            return NAME_TO_PIECE[name.strip().lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"Invalid piece: {name!r}")

    def __str__(self):
        return self.name.capitalize()

    def __format__(self, format_spec):
        return format(str(self), format_spec)


PIECE_SYMBOLS = {
    Piece.EMPTY: "-",
    Piece.RED: "r",
    Piece.BLUE: "b",
    Piece.BLOCK: "X",
}

NAME_TO_PIECE = {
    "empty": Piece.EMPTY,
    "red": Piece.RED,
    "blue": Piece.BLUE,
    "block": Piece.BLOCK,
}
