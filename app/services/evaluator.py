"""
Win/draw evaluation for a TicTacToe board.
"""
from typing import Optional, Tuple

from app.core.game_config import EMPTY, WIN_LINES
from app.models.board import Board, GameOutcome


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the first fully matched line, if there is one.

    Args:
        board: Any nine-cell board, live or hypothetical.

    Returns:
        The three indices of the line, or None.
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def evaluate(board: Board) -> GameOutcome:
    """
    Classify a board as in progress, won by X or O, or drawn.

    Pure and deterministic. Called on the live board after every move and
    on scratch boards during search.
    """
    line = winning_line(board)
    if line is not None:
        return GameOutcome.win(board[line[0]])

    if EMPTY not in board:
        return GameOutcome.draw()

    return GameOutcome.in_progress()
