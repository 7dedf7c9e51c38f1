from pydantic import BaseModel, Field, StrictInt, validator
from typing import List, Optional

from app.core.game_config import CELL_COUNT, CELL_VALUES
from app.models.board import Difficulty, GameMode, OutcomeStatus, Player, TurnState


class GameCreate(BaseModel):
    mode: Optional[GameMode] = Field(None, description="'single' (vs computer) or 'two' (hot seat)")
    difficulty: Optional[Difficulty] = Field(None, description="Computer strength in single-player mode")


class MoveCreate(BaseModel):
    index: StrictInt = Field(..., description="Cell index 0-8, row-major")


class ModeUpdate(BaseModel):
    mode: GameMode


class DifficultyUpdate(BaseModel):
    difficulty: Difficulty


class GameState(BaseModel):
    id: int
    mode: GameMode
    difficulty: Difficulty
    board: List[str]
    state: TurnState
    current_turn: Optional[Player]
    status: OutcomeStatus
    winner: Optional[Player] = None
    winning_line: Optional[List[int]] = None
    moves_count: int
    computer_should_move: bool
    computer_move_delay_ms: int


class BoardPayload(BaseModel):
    board: List[str] = Field(
        ...,
        min_length=CELL_COUNT,
        max_length=CELL_COUNT,
        description="Nine cells, each '', 'X' or 'O'"
    )

    @validator("board")
    def check_cells(cls, v):
        for cell in v:
            if cell not in CELL_VALUES:
                raise ValueError(f"cell value {cell!r} must be one of '', 'X', 'O'")
        return v


class EvaluateRequest(BoardPayload):
    pass


class EvaluateResponse(BaseModel):
    status: OutcomeStatus
    winner: Optional[Player] = None
    winning_line: Optional[List[int]] = None


class ComputeMoveRequest(BoardPayload):
    difficulty: Difficulty = Difficulty.HARD


class ComputeMoveResponse(BaseModel):
    index: int
    difficulty: Difficulty
