"""
Game Data Models

Contains the letter evaluation status and the tagged outcomes returned by a
guess submission.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class LetterStatus(Enum):
    """Per-letter evaluation status of a guess."""
    FULL = "FULL"         # right letter, right position
    PARTIAL = "PARTIAL"   # letter present elsewhere, within unclaimed occurrences
    NONE = "NONE"         # letter absent or all occurrences already claimed


class OutcomeKind(Enum):
    """Discriminator shared by every submit outcome."""
    ACCEPTED = "accepted"
    INVALID_GUESS = "invalid_guess"
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"
    GAME_FINISHED = "game_finished"


@dataclass(frozen=True)
class GuessAccepted:
    """A guess that reached the user's history (or duplicated an earlier one)."""
    is_correct: bool
    attempts: List[str]
    is_final_attempt: bool
    kind: OutcomeKind = field(default=OutcomeKind.ACCEPTED, init=False)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidGuess:
    """Guess missing or not the length of the secret word."""
    guess: Optional[str]
    expected_length: int
    kind: OutcomeKind = field(default=OutcomeKind.INVALID_GUESS, init=False)

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class AttemptsExhausted:
    """User has used every attempt for this game."""
    user_id: str
    max_attempts: int
    kind: OutcomeKind = field(default=OutcomeKind.ATTEMPTS_EXHAUSTED, init=False)

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class GameFinished:
    """Game already resolved; carries the answer and the winner for reporting."""
    word: str
    winner: Optional[str]
    kind: OutcomeKind = field(default=OutcomeKind.GAME_FINISHED, init=False)

    @property
    def ok(self) -> bool:
        return False


SubmitOutcome = Union[GuessAccepted, InvalidGuess, AttemptsExhausted, GameFinished]
