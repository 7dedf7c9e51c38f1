"""
Game controller for a single TicTacToe session.

The session owns the board and the turn state machine:

    x_turn --(X moves, game continues)--> o_turn
    o_turn --(O moves, game continues)--> x_turn
    any turn --(move ends the game)--> finished
    any state --(restart)--> x_turn

In single-player mode the human plays X and the computer plays O. The
computer's move is a separate step: the presentation layer checks
computer_should_move() and calls perform_computer_move() when it is ready,
so pacing and animation stay outside the engine.
"""
import logging
import random
from typing import Any, Dict, Optional

from app.core.exceptions import GameException
from app.models.board import (
    Board, Difficulty, GameMode, GameOutcome, Player, TurnState,
    apply_move, new_board
)
from app.services.evaluator import evaluate, winning_line
from app.services.strategies import compute_move
from app.services.validators import MoveValidator

logger = logging.getLogger(__name__)


class GameSession:
    """State of one game, driven by explicit calls from the presentation layer."""

    def __init__(
        self,
        mode: GameMode = GameMode.SINGLE,
        difficulty: Difficulty = Difficulty.EASY,
        rng: Optional[random.Random] = None,
        session_id: Optional[int] = None
    ):
        self.id = session_id
        self.mode = GameMode(mode)
        self.difficulty = Difficulty(difficulty)
        self.rng = rng or random.Random()
        self.validator = MoveValidator()

        self.board: Board = new_board()
        self.active_player = Player.X
        self.state = TurnState.X_TURN
        self.outcome = GameOutcome.in_progress()
        self.move_count = 0

    def restart(self) -> None:
        """Clear the board and hand the first move to X."""
        self.board = new_board()
        self.active_player = Player.X
        self.state = TurnState.X_TURN
        self.outcome = GameOutcome.in_progress()
        self.move_count = 0
        logger.info(f"Game {self.id} restarted ({self.mode.value}, {self.difficulty.value})")

    def select_cell(self, index: int) -> GameOutcome:
        """
        Play the active player's mark at index.

        Raises:
            GameEnded: the game is already finished.
            NotYourTurn: single-player mode and O (the computer) is to move.
            InvalidIndex: index is outside 0-8.
            CellOccupied: the cell already holds a mark.
        """
        self.validator.validate_move(self, index)
        return self._play(index)

    def on_cell_selected(self, index: int) -> bool:
        """
        Presentation callback for a click on a cell.

        Rejected moves are ignored. Returns True if the move was applied.
        """
        try:
            self.select_cell(index)
        except GameException as e:
            logger.debug(f"Ignoring move at {index!r} in game {self.id}: {e}")
            return False
        return True

    def computer_should_move(self) -> bool:
        """True when the computer owes a move."""
        return (
            self.mode == GameMode.SINGLE
            and self.state == TurnState.O_TURN
        )

    def perform_computer_move(self) -> Optional[int]:
        """
        Compute and play O's move with the current difficulty.

        Returns:
            The index played, or None if the board had no empty cell.
        """
        self.validator.validate_computer_move(self)

        index = compute_move(self.board, self.difficulty, self.rng)
        if index is None:
            logger.error(f"No move available for the computer in game {self.id}")
            return None

        self._play(index)
        return index

    def on_mode_changed(self, mode: GameMode) -> None:
        """Switch between single and two-player and start a new game."""
        self.mode = GameMode(mode)
        logger.info(f"Game {self.id} switched to {self.mode.value} mode")
        self.restart()

    def on_difficulty_changed(self, difficulty: Difficulty) -> None:
        """Applies from the computer's next move onwards."""
        self.difficulty = Difficulty(difficulty)
        logger.info(f"Game {self.id} difficulty set to {self.difficulty.value}")

    def _play(self, index: int) -> GameOutcome:
        player = self.active_player
        apply_move(self.board, index, player)
        self.move_count += 1

        self.outcome = evaluate(self.board)
        if self.outcome.is_over:
            self.state = TurnState.FINISHED
            if self.outcome.winner is not None:
                logger.info(f"Player {self.outcome.winner.value} won game {self.id}")
            else:
                logger.info(f"Game {self.id} ended in a draw")
        else:
            self.active_player = player.opposite()
            self.state = (
                TurnState.X_TURN if self.active_player == Player.X
                else TurnState.O_TURN
            )

        return self.outcome

    def snapshot(self) -> Dict[str, Any]:
        """Plain representation of the session for serialization."""
        line = winning_line(self.board)
        return {
            "id": self.id,
            "mode": self.mode,
            "difficulty": self.difficulty,
            "board": list(self.board),
            "state": self.state,
            "current_turn": None if self.state == TurnState.FINISHED else self.active_player,
            "status": self.outcome.status,
            "winner": self.outcome.winner,
            "winning_line": list(line) if line else None,
            "moves_count": self.move_count,
            "computer_should_move": self.computer_should_move(),
        }
