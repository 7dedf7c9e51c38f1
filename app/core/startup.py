"""
Application startup and shutdown logic for the TicTacToe API.
"""
import logging

from app.core.config import settings
from app.services.game_service import game_service_obj

logger = logging.getLogger(__name__)


def initialize_sessions() -> None:
    """Prepare the in-memory session registry."""
    game_service_obj.clear()
    logger.info(
        f"Session registry ready (max {settings.MAX_SESSIONS} sessions, "
        f"default mode={settings.DEFAULT_MODE.value}, difficulty={settings.DEFAULT_DIFFICULTY.value})"
    )


def shutdown_sessions() -> None:
    """Drop every live session."""
    count = game_service_obj.clear()
    logger.info(f"Discarded {count} live game sessions")
