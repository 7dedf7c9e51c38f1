from app.core.exceptions import GameEnded, NotYourTurn
from app.models.board import GameMode, Player, TurnState, check_move


class MoveValidator:
    """Validates moves and turn transitions for a game session."""

    def validate_move(self, session, index: int) -> None:
        """Validate a human move for the active player."""
        # Check if game is active
        if session.state == TurnState.FINISHED:
            raise GameEnded(f"Game {session.id} has already ended")

        # In single-player mode the human only ever plays X
        if session.mode == GameMode.SINGLE and session.active_player != Player.X:
            raise NotYourTurn("It's the computer's turn")

        check_move(session.board, index)

    def validate_computer_move(self, session) -> None:
        """Validate that the computer may move now."""
        if session.state == TurnState.FINISHED:
            raise GameEnded(f"Game {session.id} has already ended")

        if session.mode != GameMode.SINGLE:
            raise NotYourTurn("There is no computer player in two-player mode")

        if session.active_player != Player.O:
            raise NotYourTurn(f"It's player {session.active_player.value}'s turn")
