#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Tests for move generation, static evaluation and the minimax search.
"""
import time

import pytest

from ataxx.ai.board import Board
from ataxx.ai.constants import INFTY, MAX_DEPTH, WINNING_VALUE, Piece
from ataxx.ai.heuristics import static_score
from ataxx.ai.legal_moves import find_legal_moves
from ataxx.ai.minimax import MinimaxSearch, choose_move
from ataxx.ai.move import Move
from ataxx.ai.players import MinimaxPlayer


class TreeBoard:
    """A position in a hand-written game tree.

    Inner nodes are dicts from move names to children; leaves are either a
    score or "WIN" (a red win).
    """

    def __init__(self, tree, path=()):
        self.tree = tree
        self.path = path

    def node(self):
        node = self.tree
        for move in self.path:
            node = node[move]
        return node

    def copy(self):
        return TreeBoard(self.tree, self.path)

    def is_legal_move(self, move):
        node = self.node()
        return isinstance(node, dict) and move in node

    def apply_move(self, move):
        self.path = self.path + (move,)

    def get_winner(self):
        return Piece.RED if self.node() == "WIN" else None


class TreeSearch(MinimaxSearch):
    def legal_moves(self, board):
        return list(board.node())

    def static_score(self, board, winning_value):
        node = board.node()
        if node == "WIN":
            return winning_value
        return node


def plain_minimax(node, maximizing):
    if not isinstance(node, dict):
        return node
    scores = [plain_minimax(child, not maximizing) for child in node.values()]
    return max(scores) if maximizing else min(scores)


TWO_PLY = {
    "a": {"a1": 3, "a2": 12, "a3": 8},
    "b": {"b1": 2, "b2": 4, "b3": 6},
    "c": {"c1": 14, "c2": 5, "c3": 2},
}

THREE_PLY = {
    "a": {"a1": {"x": 5, "y": -3}, "a2": {"x": 9, "y": 1}},
    "b": {"b1": {"x": -7, "y": 4}, "b2": {"x": 6, "y": 6}},
    "c": {"c1": {"x": 0, "y": 2}, "c2": {"x": 8, "y": -1}},
}


def swapped(board):
    names = {"red": "blue", "blue": "red"}
    grid = [[names.get(cell, cell) for cell in row] for row in board.to_grid()]
    return Board.from_grid(grid, board.whose_move.opposite)


# ---------------------------------------------------------------- move generation

def test_legal_moves_from_start_in_scan_order():
    moves = [str(move) for move in find_legal_moves(Board())]
    assert moves == [
        "a1-a2", "a1-a3", "a1-b1", "a1-b2", "a1-b3", "a1-c1", "a1-c2", "a1-c3",
        "g7-e5", "g7-e6", "g7-e7", "g7-f5", "g7-f6", "g7-f7", "g7-g5", "g7-g6",
    ]


def test_legal_moves_are_accepted_by_board(make_board):
    board = make_board({"a1": "red", "d4": "red", "b2": "blue", "d5": "block", "g7": "blue"}, "red")
    moves = find_legal_moves(board)
    assert moves
    assert Move.PASS not in moves
    for move in moves:
        assert board.is_legal_move(move)
    assert len(set(moves)) == len(moves)


def test_legal_moves_for_blue():
    board = Board()
    board.make_move(Move.parse("a1-a2"))
    moves = find_legal_moves(board)
    assert {move.source for move in moves} == {"a7", "g1"}


def test_blocked_side_gets_single_pass(make_board, blocked_red_cells):
    board = make_board(blocked_red_cells)
    assert find_legal_moves(board) == [Move.PASS]


def test_legal_moves_do_not_mutate_board():
    board = Board()
    before = board.copy()
    find_legal_moves(board)
    assert board == before


# ---------------------------------------------------------------- evaluation

def test_static_score_is_material_difference(make_board):
    board = make_board({"a1": "red", "a2": "red", "b1": "red", "g7": "blue"})
    assert board.get_winner() is None
    assert static_score(board, WINNING_VALUE) == 2


def test_static_score_of_decided_games(make_board):
    assert static_score(make_board({"a1": "red"}), WINNING_VALUE + 3) == WINNING_VALUE + 3
    assert static_score(make_board({"a1": "blue"}), WINNING_VALUE + 1) == -(WINNING_VALUE + 1)

    cells = {f"{col}{row}": "red" if col < "d" else "blue" for col in "abcdefg" for row in "1234567"}
    for row in "1234567":
        cells["d" + row] = "block"
    draw = make_board(cells)
    assert draw.get_winner() == Piece.EMPTY
    assert static_score(draw, WINNING_VALUE) == 0


@pytest.mark.parametrize("cells", [
    {"a1": "red", "a2": "red", "g7": "blue"},
    {"a1": "red", "b2": "blue", "c3": "blue", "d4": "block"},
    {"a1": "red"},
])
def test_static_score_is_antisymmetric(make_board, cells):
    board = make_board(cells)
    for magnitude in (WINNING_VALUE, WINNING_VALUE + MAX_DEPTH):
        assert static_score(board, magnitude) == -static_score(swapped(board), magnitude)


# ---------------------------------------------------------------- search on synthetic trees

@pytest.mark.parametrize("tree", [TWO_PLY, THREE_PLY])
@pytest.mark.parametrize("sense", [1, -1])
def test_pruned_search_matches_plain_minimax(tree, sense):
    depth = 2 if tree is TWO_PLY else 3
    search = TreeSearch(max_depth=depth)
    score = search.min_max(TreeBoard(tree), depth, True, sense, -INFTY, INFTY)
    assert score == plain_minimax(tree, sense == 1)


def test_search_records_best_move():
    search = TreeSearch(max_depth=2)
    assert search.min_max(TreeBoard(TWO_PLY), 2, True, 1, -INFTY, INFTY) == 3
    assert search.last_found_move == "a"
    assert search.min_max(TreeBoard(TWO_PLY), 2, True, -1, -INFTY, INFTY) == 6
    assert search.last_found_move == "b"


def test_ties_keep_first_move():
    tree = {"first": {"x": 4}, "second": {"x": 4}, "third": {"x": 1}}
    search = TreeSearch(max_depth=2)
    search.min_max(TreeBoard(tree), 2, True, 1, -INFTY, INFTY)
    assert search.last_found_move == "first"


def test_search_without_save_move_records_nothing():
    search = TreeSearch(max_depth=2)
    search.min_max(TreeBoard(TWO_PLY), 2, False, 1, -INFTY, INFTY)
    assert search.last_found_move is None


def test_search_prefers_faster_win():
    tree = {
        "slow": {"x": {"y": "WIN"}},
        "fast": "WIN",
    }
    search = TreeSearch(max_depth=3)
    score = search.min_max(TreeBoard(tree), 3, True, 1, -INFTY, INFTY)
    assert search.last_found_move == "fast"
    assert score == WINNING_VALUE + 2
    assert search.min_max(TreeBoard(tree["slow"]), 2, False, -1, -INFTY, INFTY) == WINNING_VALUE
    assert score > WINNING_VALUE


def test_all_moves_rejected_returns_sentinel():
    class StaleSearch(MinimaxSearch):
        def legal_moves(self, board):
            return [Move.parse("a1-a4"), Move.parse("a1-d1")]

    search = StaleSearch()
    assert search.min_max(Board(), 2, True, 1, -INFTY, INFTY) == -INFTY
    assert search.last_found_move is None
    assert search.min_max(Board(), 2, True, -1, -INFTY, INFTY) == INFTY
    assert search.find_move(Board(), Piece.RED) is None


# ---------------------------------------------------------------- search on real boards

def test_depth_zero_returns_static_score(make_board):
    board = make_board({"a1": "red", "a2": "red", "g7": "blue"})
    search = MinimaxSearch()
    assert search.min_max(board, 0, True, 1, -INFTY, INFTY) == static_score(board, WINNING_VALUE)
    assert search.last_found_move is None


def test_decided_position_is_a_leaf(make_board):
    board = make_board({"a1": "red", "b1": "red"})
    search = MinimaxSearch()
    assert search.min_max(board, MAX_DEPTH, True, 1, -INFTY, INFTY) == WINNING_VALUE + MAX_DEPTH
    assert search.last_found_move is None


def test_immediate_win_is_found(make_board):
    board = make_board({"a1": "red", "b2": "blue"})
    search = MinimaxSearch()
    assert search.min_max(board.copy(), MAX_DEPTH, True, 1, -INFTY, INFTY) == WINNING_VALUE + MAX_DEPTH - 1
    assert search.last_found_move == Move.parse("a1-a2")
    assert choose_move(board, Piece.RED) == Move.parse("a1-a2")


def test_blue_win_scores_negative(make_board):
    board = make_board({"a1": "blue", "b2": "red"}, "blue")
    search = MinimaxSearch()
    assert search.min_max(board.copy(), MAX_DEPTH, True, -1, -INFTY, INFTY) == -(WINNING_VALUE + MAX_DEPTH - 1)
    assert search.last_found_move == Move.parse("a1-a2")


def test_blue_search_captures(make_board):
    board = make_board({"b2": "red", "a1": "blue", "g7": "red"}, "blue")
    move = choose_move(board, Piece.BLUE)
    assert move is not None and move.source == "a1"
    after = board.copy()
    after.make_move(move)
    assert after.get("b", "2") == Piece.BLUE


def test_find_move_leaves_board_untouched(make_board):
    board = make_board({"a1": "red", "b2": "blue", "g7": "blue"})
    before = board.copy()
    MinimaxSearch().find_move(board, Piece.RED)
    assert board == before
    assert board.num_moves == 0


def test_repeated_searches_agree(make_board):
    board = make_board({"a1": "red", "b2": "blue", "g7": "blue"})
    results = []
    for _ in range(2):
        search = MinimaxSearch()
        score = search.min_max(board.copy(), MAX_DEPTH, True, 1, -INFTY, INFTY)
        results.append((score, search.last_found_move))
    assert results[0] == results[1]
    assert results[0][1] is not None


def test_blocked_side_passes_without_search(make_board, blocked_red_cells, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("search should not run")

    monkeypatch.setattr(MinimaxSearch, "find_move", fail)
    board = make_board(blocked_red_cells)
    assert choose_move(board, Piece.RED) == Move.PASS
    assert MinimaxPlayer(Piece.RED).get_move(board) == Move.PASS


def test_opening_search_is_legal_and_deterministic():
    board = Board()
    first = MinimaxSearch()
    move = first.find_move(board, Piece.RED)
    assert move is not None and not move.is_pass
    assert move.source in ("a1", "g7")
    assert board.get(move.col1, move.row1) == Piece.EMPTY
    assert 1 <= move.distance <= 2
    assert board.is_legal_move(move)

    assert choose_move(board, Piece.RED) == move


def test_search_with_six_pieces_finishes_in_time(make_board):
    board = make_board({
        "a1": "red", "b1": "red", "g7": "red",
        "a7": "blue", "g1": "blue", "g2": "blue",
    })
    assert len(find_legal_moves(board)) == 25

    start_time = time.time()
    move = choose_move(board, Piece.RED)
    elapsed = time.time() - start_time

    assert elapsed < 60, f"depth-{MAX_DEPTH} search took {elapsed:.1f}s"
    assert board.is_legal_move(move)
    assert choose_move(board, Piece.RED) == move
