"""
Game Session

One shared Wordle game: a secret word, every player's guess history and the
finished/winner state.
"""

import threading
from typing import Dict, List, Mapping, Optional, Tuple
from ..config.game_settings import MAX_ATTEMPTS
from ..models.game import (
    AttemptsExhausted,
    GameFinished,
    GuessAccepted,
    InvalidGuess,
    LetterStatus,
    SubmitOutcome,
)
from .diff_engine import build_letter_positions, evaluate


class GameSession:
    """
    Stateful multiplayer game around a single secret word.

    This class handles:
    - Per-user guess history with case-insensitive duplicate suppression
    - Per-user attempt limits (exhausting them never closes the game)
    - The Open -> Finished transition on the first correct guess

    Submissions are serialized by a per-session lock so a win is seen by the
    very next submission.
    """

    def __init__(self,
                 secret_word: str,
                 guesses: Optional[Mapping[str, List[str]]] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        """
        Args:
            secret_word: Word to guess (stored upper-cased)
            guesses: Existing history, user id -> attempts in submission order
            max_attempts: Number of distinct guesses each user may record
        """
        if not secret_word:
            raise ValueError("Secret word cannot be empty")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self._word = secret_word.upper()
        self._letter_positions = build_letter_positions(self._word)
        self._max_attempts = max_attempts
        self._guesses: Dict[str, List[str]] = {
            user_id: list(attempts) for user_id, attempts in (guesses or {}).items()
        }
        self._finished = False
        self._winner: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def word(self) -> str:
        return self._word

    @property
    def letter_positions(self) -> Mapping[str, Tuple[int, ...]]:
        """Read-only letter -> positions index of the secret word."""
        return self._letter_positions

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def winner(self) -> Optional[str]:
        return self._winner

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def players(self) -> List[str]:
        """User ids in order of first contact."""
        return list(self._guesses)

    def attempts_for(self, user_id: str) -> List[str]:
        return list(self._guesses.get(user_id, []))

    def evaluate(self, guess: str) -> List[Tuple[str, LetterStatus]]:
        """Scores a guess against the secret word."""
        return evaluate(guess, self._word)

    def submit(self, user_id: str, raw_guess: Optional[str]) -> SubmitOutcome:
        """
        Processes one guess from a user.

        Checks run in a fixed order: finished game, exhausted attempts,
        correctness (which may finish the game), then guess validity. A correct
        guess therefore finishes the game before its length is validated.

        Args:
            user_id: Identifier of the guessing user
            raw_guess: Guess text, kept verbatim in the history

        Returns:
            GuessAccepted, or InvalidGuess / AttemptsExhausted / GameFinished
        """
        with self._lock:
            if self._finished:
                return GameFinished(word=self._word, winner=self._winner)

            attempts = self._guesses.setdefault(user_id, [])
            if len(attempts) >= self._max_attempts:
                return AttemptsExhausted(user_id=user_id, max_attempts=self._max_attempts)

            is_correct = raw_guess is not None and raw_guess.upper() == self._word
            if is_correct:
                self._winner = user_id
                self._finished = True

            if not raw_guess or len(raw_guess) != len(self._word):
                return InvalidGuess(guess=raw_guess, expected_length=len(self._word))

            normalized = raw_guess.upper()
            if not any(attempt.upper() == normalized for attempt in attempts):
                attempts.append(raw_guess)

            return GuessAccepted(
                is_correct=is_correct,
                attempts=list(attempts),
                is_final_attempt=len(attempts) == self._max_attempts
            )
