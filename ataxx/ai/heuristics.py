from .constants import Piece


def static_score(board, winning_value):
    """Return a heuristic value for BOARD, positive when red is ahead.

    Decided games score +WINNING_VALUE for a red win, -WINNING_VALUE for a
    blue win and 0 for a draw. Otherwise the score is the material difference,
    red pieces minus blue pieces.
    """
    winner = board.get_winner()
    if winner is not None:
        if winner == Piece.RED:
            return winning_value
        if winner == Piece.BLUE:
            return -winning_value
        return 0

    return board.red_pieces - board.blue_pieces
