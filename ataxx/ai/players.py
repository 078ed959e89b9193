#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Players for Ataxx.

Every player offers the same capability, get_move(board), returning the move
it wants to play on BOARD or None when it has nothing to play yet. The game
loop does not care whether a move comes from a person or an algorithm.
"""
import logging
import random
import time
from typing import Optional

from .constants import Piece
from .legal_moves import find_legal_moves
from .minimax import choose_move
from .move import Move

logger = logging.getLogger(__name__)


class MinimaxPlayer:
    """Player choosing its moves with the fixed-depth alpha-beta search."""

    is_auto = True

    def __init__(self, color: Piece):
        self.color = color

    def get_move(self, board) -> Optional[Move]:
        start_time = time.time()
        move = choose_move(board, self.color)
        logger.info("%s chose %s in %.2fs", self.color, move, time.time() - start_time)
        return move


class RandomPlayer:
    """Player picking uniformly among the legal moves.

    The generator belongs to the player, so identical seeds replay identical
    games.
    """

    is_auto = True

    def __init__(self, color: Piece, seed=None):
        self.color = color
        self.rng = random.Random(seed)

    def reseed(self, seed):
        self.rng.seed(seed)

    def get_move(self, board) -> Optional[Move]:
        return self.rng.choice(find_legal_moves(board))


class HumanPlayer:
    """Player whose moves are typed as commands.

    Commands that are not moves are handed back to the game to execute.
    """

    is_auto = False

    def __init__(self, color: Piece, game):
        self.color = color
        self.game = game

    def get_move(self, board) -> Optional[Move]:
        line = self.game.read_command()
        if line is None:
            self.game.quit()
            return None
        try:
            return Move.parse(line)
        except ValueError:
            self.game.execute(line)
            return None
