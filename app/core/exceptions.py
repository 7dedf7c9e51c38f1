class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class InvalidIndex(GameException):
    """Raised when a move targets an index outside the board."""
    pass


class CellOccupied(GameException):
    """Raised when trying to move to an occupied cell."""
    pass


class NoMoveAvailable(GameException):
    """Raised when the computer is asked to move on a full board."""
    pass


class NotYourTurn(GameException):
    """Raised when a player tries to move out of turn."""
    pass


class GameEnded(GameException):
    """Raised when trying to move in an ended game."""
    pass


class GameNotFound(GameException):
    """Raised when a game session is not found."""
    pass
