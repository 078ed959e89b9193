# ataxx/models/game.py
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field


class BoardRequest(BaseModel):
    board: List[List[str]]
    current_player: str


class Position(BaseModel):
    row: str
    col: str


class MoveResponse(BaseModel):
    move: str
    from_pos: Optional[Position] = Field(default=None, alias="from")
    to_pos: Optional[Position] = Field(default=None, alias="to")
    execution_time: float
    current_player: str


class LegalMovesResponse(BaseModel):
    legal_moves: List[str]


class EvaluationResponse(BaseModel):
    winner: Optional[str]
    score: int
    red_pieces: int
    blue_pieces: int


class GameCreate(BaseModel):
    blocks: List[str] = []
    moves: List[str]
    winner: str


class Game(GameCreate):
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
