"""
Services Package

Contains the game logic and the session store.
"""

from .diff_engine import build_letter_positions, evaluate
from .game_session import GameSession
from .game_service import GameService

__all__ = [
    'build_letter_positions', 'evaluate',
    'GameSession',
    'GameService'
]
