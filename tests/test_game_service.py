import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.exceptions import GameNotFound
from app.models.board import Difficulty, GameMode
from app.services.game_service import GameService


class TestSettings:

    def test_defaults_are_enums(self):
        settings = Settings(DEFAULT_MODE="two", DEFAULT_DIFFICULTY="hard")
        assert settings.DEFAULT_MODE == GameMode.TWO
        assert settings.DEFAULT_DIFFICULTY == Difficulty.HARD

    def test_bad_defaults_fail_at_load(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_MODE", "solo")
        with pytest.raises(ValidationError):
            Settings()

        monkeypatch.setenv("DEFAULT_MODE", "single")
        monkeypatch.setenv("DEFAULT_DIFFICULTY", "impossible")
        with pytest.raises(ValidationError):
            Settings()


class TestGameService:

    def test_create_uses_defaults(self):
        service = GameService(max_sessions=5, seed=1)
        session = service.create_game()
        assert session.mode == GameMode.SINGLE
        assert session.difficulty == Difficulty.EASY
        assert service.get_game(session.id) is session

    def test_explicit_session_limit_is_kept(self):
        assert GameService(max_sessions=0).max_sessions == 0
        assert GameService(max_sessions=None).max_sessions > 0

    def test_zero_limit_keeps_no_sessions(self):
        service = GameService(max_sessions=0)
        session = service.create_game()
        assert len(service) == 0
        with pytest.raises(GameNotFound):
            service.get_game(session.id)

    def test_least_recently_used_is_evicted(self):
        service = GameService(max_sessions=2)
        first = service.create_game()
        second = service.create_game()
        service.get_game(first.id)
        third = service.create_game()

        assert len(service) == 2
        assert service.get_game(first.id) is first
        assert service.get_game(third.id) is third
        with pytest.raises(GameNotFound):
            service.get_game(second.id)
