"""
Board and enum types for the TicTacToe engine.

A board is a flat list of nine cell values indexed 0-8 in row-major order.
Each cell is EMPTY (""), "X" or "O", which is also how the browser renders it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from app.core.exceptions import CellOccupied, InvalidIndex
from app.core.game_config import CELL_COUNT, EMPTY, is_valid_index

Board = List[str]


class Player(str, Enum):
    """The two marks. X is always the human in single-player mode."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameMode(str, Enum):
    SINGLE = "single"
    TWO = "two"


class TurnState(str, Enum):
    X_TURN = "x_turn"
    O_TURN = "o_turn"
    FINISHED = "finished"


class OutcomeStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of evaluating a board.

    Derived from the board every time, never stored as the source of truth.
    """
    status: OutcomeStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "GameOutcome":
        return cls(OutcomeStatus.WIN, Player(player))

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS


def new_board() -> Board:
    """Create an all-empty board."""
    return [EMPTY] * CELL_COUNT


def empty_cells(board: Board) -> List[int]:
    """Indices of every empty cell, in increasing order."""
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def check_move(board: Board, index: int) -> None:
    """Raise if a mark cannot be placed at index."""
    if not is_valid_index(index):
        raise InvalidIndex(f"Cell index {index!r} is invalid. Must be 0-{CELL_COUNT - 1}.")
    if board[index] != EMPTY:
        raise CellOccupied(f"Cell {index} is already occupied by {board[index]}")


def apply_move(board: Board, index: int, player: Player) -> Board:
    """
    Place player's mark at index.

    Args:
        board: The board to mutate.
        index: Target cell (0-8).
        player: Mark to place.

    Returns:
        The same board, updated.

    Raises:
        InvalidIndex: index is outside 0-8.
        CellOccupied: the cell already holds a mark.
    """
    check_move(board, index)
    board[index] = Player(player).value
    return board
