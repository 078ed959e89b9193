import logging
import time
from typing import Optional

from .constants import INFTY, MAX_DEPTH, WINNING_VALUE, Piece
from .heuristics import static_score
from .legal_moves import find_legal_moves
from .move import Move

logger = logging.getLogger(__name__)


class MinimaxSearch:
    """Fixed-depth minimax search with alpha-beta pruning.

    Red is the maximizing side and Blue the minimizing side, regardless of who
    asks for a move. Each child position is searched on its own copy of the
    board, so sibling branches never see each other's moves.
    """

    def __init__(self, max_depth=MAX_DEPTH):
        self.max_depth = max_depth
        self.last_found_move: Optional[Move] = None

    def legal_moves(self, board):
        return find_legal_moves(board)

    def static_score(self, board, winning_value):
        return static_score(board, winning_value)

    def find_move(self, board, color) -> Optional[Move]:
        """Return the best move for COLOR on BOARD.

        BOARD itself is left untouched. Returns None only if every candidate
        move was rejected when replayed on a copy of the board.
        """
        self.last_found_move = None
        sense = 1 if color == Piece.RED else -1
        start_time = time.time()
        score = self.min_max(board.copy(), self.max_depth, True, sense, -INFTY, INFTY)
        logger.debug("%s search: move %s, score %d, %.3fs",
                     color, self.last_found_move, score, time.time() - start_time)
        return self.last_found_move

    def min_max(self, board, depth, save_move, sense, alpha, beta):
        """Find a move from BOARD and return its value.

        The move is recorded in last_found_move iff SAVE_MOVE. It should have
        maximal value, or value >= BETA, if SENSE is 1, and minimal value if
        SENSE is -1. Searches DEPTH levels; at depth 0, or when the game is
        over on BOARD, returns the static score and records nothing.

        The minimizer tightens the same ALPHA bound as the maximizer
        (alpha = min(alpha, best)), and both cut off when alpha >= beta.
        """
        # WINNING_VALUE + depth favours wins that happen sooner, since depth
        # is larger the fewer moves have been made.
        if depth == 0 or board.get_winner() is not None:
            return self.static_score(board, WINNING_VALUE + depth)

        best = None
        if sense == 1:
            best_score = -INFTY
            for move in self.legal_moves(board):
                child = board.copy()
                if not child.is_legal_move(move):
                    continue
                child.apply_move(move)
                response = self.min_max(child, depth - 1, False, -1, alpha, beta)
                if response > best_score:
                    best_score = response
                    best = move
                    alpha = max(alpha, best_score)
                    if alpha >= beta:
                        return best_score
        else:
            best_score = INFTY
            for move in self.legal_moves(board):
                child = board.copy()
                if not child.is_legal_move(move):
                    continue
                child.apply_move(move)
                response = self.min_max(child, depth - 1, False, 1, alpha, beta)
                if response < best_score:
                    best_score = response
                    best = move
                    alpha = min(alpha, best_score)
                    if alpha >= beta:
                        return best_score

        if save_move:
            self.last_found_move = best
        return best_score


def choose_move(board, color) -> Optional[Move]:
    """Return the move COLOR should play on BOARD.

    A side with no legal move passes without searching.
    """
    if not board.can_move(color):
        return Move.PASS
    return MinimaxSearch().find_move(board, color)
