"""
Game Service

Session store for the daily games, keyed by (date, channel).
"""

import random
import threading
from datetime import date
from typing import Dict, List, Optional, Tuple
from ..config.game_settings import WORD_POOL, MAX_ATTEMPTS
from ..utils.game_logger import game_logger
from .game_session import GameSession


class GameService:
    """
    Holds the active game sessions of the process.

    This class handles:
    - Lazy creation of one session per (date, channel) key
    - Secret word selection from the word pool
    - Dropping sessions that belong to previous days

    An instance is created by the entry point and handed to the Flask app;
    nothing in the package keeps a global reference to it.
    """

    def __init__(self,
                 word_pool: Optional[List[str]] = None,
                 max_attempts: int = MAX_ATTEMPTS,
                 rng: Optional[random.Random] = None):
        self.games: Dict[str, GameSession] = {}  # Active sessions by game_id
        self.word_pool = [word.upper() for word in (word_pool or WORD_POOL)]
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()
        self._game_dates: Dict[str, date] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_game_id(game_date: date, channel_id: str) -> str:
        """Builds the ``DD/MM/YYYY-<channel>`` key of a daily game."""
        return f"{game_date.strftime('%d/%m/%Y')}-{channel_id}"

    @property
    def active_games(self) -> int:
        return len(self.games)

    def choose_secret_word(self) -> str:
        """Picks a random word from the pool (the server keeps it secret)."""
        return self._rng.choice(self.word_pool)

    def get_game(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def add_game(self, game_id: str, session: GameSession, game_date: Optional[date] = None) -> None:
        """Registers an existing session under a game id, replacing any previous one."""
        with self._lock:
            self.games[game_id] = session
            if game_date is not None:
                self._game_dates[game_id] = game_date

    def get_or_create_game(self, game_date: date, channel_id: str) -> Tuple[str, GameSession]:
        """
        Returns the session for a day and channel, creating it on first use.

        Creating a session also drops the sessions of earlier days.

        Args:
            game_date: Day the game belongs to
            channel_id: Channel key (may be a shared constant)

        Returns:
            Tuple of (game_id, session)
        """
        game_id = self.make_game_id(game_date, channel_id)
        with self._lock:
            session = self.games.get(game_id)
            if session is not None:
                return game_id, session

            removed = self._prune_locked(game_date)
            session = GameSession(self.choose_secret_word(), max_attempts=self.max_attempts)
            self.games[game_id] = session
            self._game_dates[game_id] = game_date

        game_logger.log_game_event(
            game_id, 'game_created', None,
            word_length=len(session.word), max_attempts=session.max_attempts,
            pruned_games=removed
        )
        return game_id, session

    def prune_games(self, before: date) -> int:
        """
        Removes sessions created for days earlier than ``before``.

        Sessions added without a date are kept.

        Returns:
            int: Number of sessions removed
        """
        with self._lock:
            return self._prune_locked(before)

    def _prune_locked(self, before: date) -> int:
        stale = [game_id for game_id, game_date in self._game_dates.items() if game_date < before]
        for game_id in stale:
            self.games.pop(game_id, None)
            del self._game_dates[game_id]
        return len(stale)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            self._game_dates.pop(game_id, None)
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False
