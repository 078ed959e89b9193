#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Self-play matches between the minimax player and a random mover.

Colours alternate from game to game so that neither player always moves first.
"""
import logging
import time

import numpy as np

from ataxx.ai.board import Board
from ataxx.ai.constants import Piece
from ataxx.ai.players import MinimaxPlayer, RandomPlayer

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 200


def play_match(red, blue, max_moves=DEFAULT_MAX_MOVES, board=None):
    """Play one game between two automatic players.

    Args:
        red: Player for red.
        blue: Player for blue.
        max_moves: Moves after which an unfinished game is scored by material.
        board: Starting position (default: the standard start).

    Returns:
        tuple: (winner, moves) where winner is Piece.RED, Piece.BLUE or
            Piece.EMPTY for a draw, and moves is the list of moves played.
    """
    board = board.copy() if board is not None else Board()
    players = {Piece.RED: red, Piece.BLUE: blue}

    while board.get_winner() is None and board.num_moves < max_moves:
        player = players[board.whose_move]
        move = player.get_move(board)
        if move is None:
            raise RuntimeError(f"{board.whose_move} found no move")
        board.make_move(move)

    winner = board.get_winner()
    if winner is None:
        logger.info("Game stopped after %d moves; scoring by material", board.num_moves)
        difference = board.red_pieces - board.blue_pieces
        winner = Piece.RED if difference > 0 else Piece.BLUE if difference < 0 else Piece.EMPTY
    return winner, board.moves


def run_simulation(number_games=10, seed=None, max_moves=DEFAULT_MAX_MOVES):
    """Run a series of minimax-versus-random games.

    Returns:
        dict: Number of games won by "minimax" and "random", and "draw"s.
    """
    results = {"minimax": 0, "random": 0, "draw": 0}
    minimax_is_red = True
    game_lengths = []
    game_times = []

    for i in range(number_games):
        minimax_color = Piece.RED if minimax_is_red else Piece.BLUE
        random_color = minimax_color.opposite
        players = {
            minimax_color: MinimaxPlayer(minimax_color),
            random_color: RandomPlayer(random_color, None if seed is None else seed + i),
        }

        begin = time.time()
        winner, moves = play_match(players[Piece.RED], players[Piece.BLUE], max_moves)
        game_lengths.append(len(moves))
        game_times.append(time.time() - begin)
        if winner == minimax_color:
            results["minimax"] += 1
        elif winner == random_color:
            results["random"] += 1
        else:
            results["draw"] += 1

        logger.info("Game %d/%d: minimax played %s, %d moves, result %s (%.1fs)",
                    i + 1, number_games, minimax_color, len(moves),
                    "draw" if winner == Piece.EMPTY else winner, game_times[-1])
        minimax_is_red = not minimax_is_red

    logger.info("Final results: minimax %d, random %d, draws %d",
                results["minimax"], results["random"], results["draw"])
    if number_games:
        logger.info("Average game: %.1f moves, %.1fs (longest %d moves)",
                    np.mean(game_lengths), np.mean(game_times), np.max(game_lengths))
    return results
