from typing import Optional

from pydantic_settings import BaseSettings

from app.models.board import Difficulty, GameMode


class Settings(BaseSettings):
    DEBUG: bool = False
    DEFAULT_MODE: GameMode = GameMode.SINGLE
    DEFAULT_DIFFICULTY: Difficulty = Difficulty.EASY
    # Pacing hint for the browser before it requests the computer's move
    COMPUTER_MOVE_DELAY_MS: int = 500
    MAX_SESSIONS: int = 1000
    RANDOM_SEED: Optional[int] = None

    class Config:
        env_file = ".env"

settings = Settings()
