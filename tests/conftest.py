import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_game_service
from app.services.game_service import GameService
from main import app


@pytest.fixture
def game_service():
    return GameService(max_sessions=50, seed=1234)


@pytest.fixture
def client(game_service):
    def override_get_game_service():
        return game_service

    app.dependency_overrides[get_game_service] = override_get_game_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
