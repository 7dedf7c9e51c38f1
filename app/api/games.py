"""
Game session API endpoints.

Game exceptions raised by the session propagate to the handlers in
app.core.exception_handlers, which map them to error codes.
"""
from fastapi import APIRouter, Depends, Response

from app.api.deps import get_game_service
from app.core.config import settings
from app.schemas import game as game_schemas
from app.services.game_service import GameService
from app.services.game_session import GameSession

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={404: {"description": "Game not found"}}
)


def to_state(session: GameSession) -> game_schemas.GameState:
    return game_schemas.GameState(
        **session.snapshot(),
        computer_move_delay_ms=settings.COMPUTER_MOVE_DELAY_MS
    )


@router.post("", response_model=game_schemas.GameState)
def create_game(
        game: game_schemas.GameCreate,
        service: GameService = Depends(get_game_service)
):
    """
    Create a new game session.

    X always moves first. Mode and difficulty fall back to the server
    defaults when omitted.
    """
    return to_state(service.create_game(game.mode, game.difficulty))


@router.get("/{game_id}", response_model=game_schemas.GameState)
def get_game_state(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """
    Get the current state of a game.

    Returns:
    - Board (nine cells, '' for empty)
    - Turn state and whose turn it is
    - Outcome and winning line (if completed)
    - Whether the computer owes a move
    """
    return to_state(service.get_game(game_id))


@router.post("/{game_id}/move", response_model=game_schemas.GameState)
def make_move(
        game_id: int,
        move: game_schemas.MoveCreate,
        service: GameService = Depends(get_game_service)
):
    """
    Play the active player's mark on a cell.

    Validates:
    - Game exists and is not finished
    - It's the human's turn (single-player mode)
    - The index is 0-8 and the cell is empty

    In single-player mode the response has computer_should_move set when
    the computer is to reply; request /computer-move after
    computer_move_delay_ms.
    """
    return to_state(service.make_move(game_id, move.index))


@router.post("/{game_id}/computer-move", response_model=game_schemas.GameState)
def computer_move(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """Play the computer's (O) move using the session's current difficulty."""
    return to_state(service.computer_move(game_id))


@router.post("/{game_id}/restart", response_model=game_schemas.GameState)
def restart_game(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """Clear the board and give the first move to X."""
    return to_state(service.restart_game(game_id))


@router.put("/{game_id}/mode", response_model=game_schemas.GameState)
def set_mode(
        game_id: int,
        update: game_schemas.ModeUpdate,
        service: GameService = Depends(get_game_service)
):
    """Switch between single and two-player mode. Restarts the game."""
    return to_state(service.set_mode(game_id, update.mode))


@router.put("/{game_id}/difficulty", response_model=game_schemas.GameState)
def set_difficulty(
        game_id: int,
        update: game_schemas.DifficultyUpdate,
        service: GameService = Depends(get_game_service)
):
    """Change the computer's strength from its next move onwards."""
    return to_state(service.set_difficulty(game_id, update.difficulty))


@router.delete("/{game_id}", status_code=204)
def delete_game(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    service.delete_game(game_id)
    return Response(status_code=204)
