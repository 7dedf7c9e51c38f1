"""
Dependency injection for API endpoints.
"""
from app.services.game_service import GameService, game_service_obj


def get_game_service() -> GameService:
    """
    Session registry dependency. Tests override it with a fresh registry.
    """
    return game_service_obj
