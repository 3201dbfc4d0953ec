"""
Data Models Package

Contains the data models shared by the game session, the store and the webhook.
"""

from .game import (
    AttemptsExhausted,
    GameFinished,
    GuessAccepted,
    InvalidGuess,
    LetterStatus,
    OutcomeKind,
    SubmitOutcome,
)

__all__ = [
    'AttemptsExhausted', 'GameFinished', 'GuessAccepted', 'InvalidGuess',
    'LetterStatus', 'OutcomeKind', 'SubmitOutcome'
]
