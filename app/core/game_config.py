"""
Configuration constants for the TicTacToe game engine.
"""

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Cell values as the browser renders them
EMPTY = ""
X_MARK = "X"
O_MARK = "O"
CELL_VALUES = (EMPTY, X_MARK, O_MARK)

# Rows, columns, diagonals. Scan order matters for the medium heuristic.
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

# Minimax scores: WIN_SCORE - depth for an O win, depth - WIN_SCORE for an X win
WIN_SCORE = 10
DRAW_SCORE = 0


def is_valid_index(index) -> bool:
    """Check if an index addresses a cell on the board."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT
