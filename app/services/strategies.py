"""
Move selection for the computer player.

The computer always plays O against a human X. Three strategies back the
three difficulty tiers:

- easy: a uniformly random empty cell
- medium: take an immediate win, else block X's immediate win, else random
- hard: exhaustive minimax over the remaining game tree

Every strategy returns a cell index, or None when the board is full.
"""
import logging
import random
from typing import Optional

from app.core.game_config import DRAW_SCORE, EMPTY, WIN_LINES, WIN_SCORE
from app.models.board import Board, Difficulty, OutcomeStatus, Player, empty_cells
from app.services.evaluator import evaluate

logger = logging.getLogger(__name__)


def random_move(board: Board, rng: Optional[random.Random] = None) -> Optional[int]:
    """Pick any empty cell uniformly at random."""
    candidates = empty_cells(board)
    if not candidates:
        return None
    return (rng or random).choice(candidates)


def _completing_cell(board: Board, mark: str) -> Optional[int]:
    """Empty cell of the first line holding exactly two of mark and one blank."""
    for line in WIN_LINES:
        values = [board[i] for i in line]
        if values.count(mark) == 2 and EMPTY in values:
            return line[values.index(EMPTY)]
    return None


def heuristic_move(board: Board, rng: Optional[random.Random] = None) -> Optional[int]:
    """
    Two-ply look-ahead: win if possible, otherwise block, otherwise random.

    Lines are scanned in WIN_LINES order so the result is deterministic
    whenever a win or block exists.
    """
    move = _completing_cell(board, Player.O.value)
    if move is not None:
        return move

    move = _completing_cell(board, Player.X.value)
    if move is not None:
        return move

    return random_move(board, rng)


def minimax(board: Board, depth: int, maximizing: bool) -> int:
    """
    Score a board for O assuming both sides play perfectly.

    Args:
        board: Scratch board. Trial marks are placed in place and always
            removed again before returning.
        depth: Plies played since the search root.
        maximizing: True when it is O's turn.

    Returns:
        WIN_SCORE - depth for an O win, depth - WIN_SCORE for an X win,
        DRAW_SCORE for a draw. Faster wins and slower losses score better.
    """
    outcome = evaluate(board)
    if outcome.status == OutcomeStatus.WIN:
        if outcome.winner == Player.O:
            return WIN_SCORE - depth
        return depth - WIN_SCORE
    if outcome.status == OutcomeStatus.DRAW:
        return DRAW_SCORE

    if maximizing:
        best = float('-inf')
        for i in empty_cells(board):
            board[i] = Player.O.value
            try:
                best = max(best, minimax(board, depth + 1, False))
            finally:
                board[i] = EMPTY
        return best
    else:
        best = float('inf')
        for i in empty_cells(board):
            board[i] = Player.X.value
            try:
                best = min(best, minimax(board, depth + 1, True))
            finally:
                board[i] = EMPTY
        return best


def best_move(board: Board) -> Optional[int]:
    """
    Get the optimal move for O.

    Cells are tried in increasing index order and only a strictly better
    score replaces the current choice, so the lowest index wins ties.
    """
    best_score = float('-inf')
    move = None

    for i in empty_cells(board):
        board[i] = Player.O.value
        try:
            score = minimax(board, 0, False)
        finally:
            board[i] = EMPTY

        if score > best_score:
            best_score = score
            move = i

    if move is not None:
        logger.debug(f"Minimax chose cell {move} (score: {best_score})")
    return move


def compute_move(
    board: Board,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None
) -> Optional[int]:
    """
    Choose O's next move with the strategy for the given difficulty.

    Args:
        board: Current board. It is left unchanged.
        difficulty: easy, medium or hard.
        rng: Random source for the easy and medium tiers.

    Returns:
        Cell index, or None if no empty cell remains.
    """
    difficulty = Difficulty(difficulty)

    if difficulty == Difficulty.EASY:
        return random_move(board, rng)
    if difficulty == Difficulty.MEDIUM:
        return heuristic_move(board, rng)
    return best_move(list(board))
