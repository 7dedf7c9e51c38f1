"""
Stateless engine endpoints.

Let a client evaluate or play an arbitrary board without creating a session.
"""
from fastapi import APIRouter

from app.core.exceptions import GameEnded, NoMoveAvailable
from app.models.board import OutcomeStatus
from app.schemas import game as game_schemas
from app.services.evaluator import evaluate, winning_line
from app.services.strategies import compute_move

router = APIRouter(
    prefix="/engine",
    tags=["engine"]
)


@router.post("/evaluate", response_model=game_schemas.EvaluateResponse)
def evaluate_board(request: game_schemas.EvaluateRequest):
    """Classify a board as in progress, won or drawn."""
    outcome = evaluate(request.board)
    line = winning_line(request.board)
    return game_schemas.EvaluateResponse(
        status=outcome.status,
        winner=outcome.winner,
        winning_line=list(line) if line else None
    )


@router.post("/move", response_model=game_schemas.ComputeMoveResponse)
def suggest_move(request: game_schemas.ComputeMoveRequest):
    """
    Compute O's move for a board.

    easy picks at random, medium wins or blocks, hard searches the full tree.
    """
    outcome = evaluate(request.board)
    if outcome.status == OutcomeStatus.WIN:
        raise GameEnded(f"The board is already won by {outcome.winner.value}")

    index = compute_move(request.board, request.difficulty)
    if index is None:
        raise NoMoveAvailable("The board is full")
    return game_schemas.ComputeMoveResponse(index=index, difficulty=request.difficulty)
