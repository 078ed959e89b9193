import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from ataxx.ai.board import Board
from ataxx.ai.constants import WINNING_VALUE, Piece
from ataxx.ai.heuristics import static_score
from ataxx.ai.legal_moves import find_legal_moves
from ataxx.ai.minimax import choose_move
from ataxx.ai.move import CELL_PATTERN, Move
from ataxx.database import get_games_collection
from ataxx.models.game import (
    BoardRequest, EvaluationResponse, Game, GameCreate, LegalMovesResponse, MoveResponse
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _board_from_request(request: BoardRequest) -> Board:
    try:
        return Board.from_grid(request.board, request.current_player)
    except ValueError as excp:
        raise HTTPException(status_code=400, detail=str(excp))


def _winner_name(winner):
    if winner is None:
        return None
    if winner == Piece.EMPTY:
        return "draw"
    return winner.name.lower()


@router.post("/bot-move/", response_model=MoveResponse)
def get_bot_move(request: BoardRequest):
    board = _board_from_request(request)
    if board.get_winner() is not None:
        raise HTTPException(status_code=409, detail="Game is already over")

    start_time = time.time()
    move = choose_move(board, board.whose_move)
    execution_time = time.time() - start_time
    if move is None:
        raise HTTPException(status_code=404, detail="No valid move found")
    logger.info("Bot move for %s: %s (%.2fs)", board.whose_move, move, execution_time)

    positions = {}
    if not move.is_pass:
        positions = {
            "from": {"col": move.col0, "row": move.row0},
            "to": {"col": move.col1, "row": move.row1},
        }
    return MoveResponse(
        move=str(move),
        execution_time=execution_time,
        current_player=board.whose_move.name.lower(),
        **positions,
    )


@router.post("/legal-moves/", response_model=LegalMovesResponse)
async def get_legal_moves(request: BoardRequest):
    board = _board_from_request(request)
    return LegalMovesResponse(legal_moves=[str(move) for move in find_legal_moves(board)])


@router.post("/evaluate/", response_model=EvaluationResponse)
async def evaluate_state(request: BoardRequest):
    board = _board_from_request(request)
    return EvaluationResponse(
        winner=_winner_name(board.get_winner()),
        score=static_score(board, WINNING_VALUE),
        red_pieces=board.red_pieces,
        blue_pieces=board.blue_pieces,
    )


@router.post("/games/")
async def save_game(game: GameCreate, db=Depends(get_games_collection)):
    if game.winner not in ("red", "blue", "draw"):
        raise HTTPException(status_code=400, detail=f"Invalid winner: {game.winner}")
    for block in game.blocks:
        if CELL_PATTERN.match(block.lower()) is None:
            raise HTTPException(status_code=400, detail=f"Invalid block: {block!r}")
    try:
        for move in game.moves:
            Move.parse(move)
    except ValueError as excp:
        raise HTTPException(status_code=400, detail=str(excp))

    db.insert_one(Game(**game.model_dump()).model_dump())
    return {"message": "Game saved"}


@router.get("/games/")
async def get_games(db=Depends(get_games_collection)):
    return list(db.find({}, {"_id": 0}))
