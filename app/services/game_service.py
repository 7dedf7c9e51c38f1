import itertools
import logging
import random
import threading
from collections import OrderedDict
from typing import Optional

from app.core.config import settings
from app.core.exceptions import GameNotFound
from app.models.board import Difficulty, GameMode
from app.services.game_session import GameSession

logger = logging.getLogger(__name__)


class GameService:
    """
    In-memory registry of live game sessions.

    Sessions are transient: nothing survives a restart of the process.
    Each session is mutated under the registry lock so one request at a
    time drives a given board.
    """

    def __init__(self, max_sessions: Optional[int] = None, seed: Optional[int] = None):
        self.max_sessions = max_sessions if max_sessions is not None else settings.MAX_SESSIONS
        self.seed = seed if seed is not None else settings.RANDOM_SEED
        self._sessions: "OrderedDict[int, GameSession]" = OrderedDict()
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def create_game(
        self,
        mode: Optional[GameMode] = None,
        difficulty: Optional[Difficulty] = None
    ) -> GameSession:
        mode = GameMode(mode or settings.DEFAULT_MODE)
        difficulty = Difficulty(difficulty or settings.DEFAULT_DIFFICULTY)

        with self._lock:
            game_id = next(self._ids)
            rng = random.Random(self.seed + game_id) if self.seed is not None else random.Random()
            session = GameSession(mode, difficulty, rng=rng, session_id=game_id)
            self._sessions[game_id] = session

            # Simple LRU: evict the least recently used session
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info(f"Evicted game {evicted_id} (session limit {self.max_sessions})")

        logger.info(f"Game {game_id} created ({mode.value}, {difficulty.value})")
        return session

    def get_game(self, game_id: int) -> GameSession:
        with self._lock:
            session = self._sessions.get(game_id)
            if session is None:
                raise GameNotFound(f"Game {game_id} not found")
            self._sessions.move_to_end(game_id)
            return session

    def make_move(self, game_id: int, index: int) -> GameSession:
        with self._lock:
            session = self.get_game(game_id)
            session.select_cell(index)
            return session

    def computer_move(self, game_id: int) -> GameSession:
        with self._lock:
            session = self.get_game(game_id)
            session.perform_computer_move()
            return session

    def restart_game(self, game_id: int) -> GameSession:
        with self._lock:
            session = self.get_game(game_id)
            session.restart()
            return session

    def set_mode(self, game_id: int, mode: GameMode) -> GameSession:
        with self._lock:
            session = self.get_game(game_id)
            session.on_mode_changed(mode)
            return session

    def set_difficulty(self, game_id: int, difficulty: Difficulty) -> GameSession:
        with self._lock:
            session = self.get_game(game_id)
            session.on_difficulty_changed(difficulty)
            return session

    def delete_game(self, game_id: int) -> None:
        with self._lock:
            if self._sessions.pop(game_id, None) is None:
                raise GameNotFound(f"Game {game_id} not found")
        logger.info(f"Game {game_id} deleted")

    def clear(self) -> int:
        """Drop every session. Returns how many were live."""
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
            return count

    def __len__(self) -> int:
        return len(self._sessions)


game_service_obj = GameService()
