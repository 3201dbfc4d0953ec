"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_slack_signature, compute_slack_signature
from .helpers import get_command_payload, get_user_identity, has_game_started, normalize_guess
from .game_logger import game_logger

__all__ = [
    'require_slack_signature', 'compute_slack_signature',
    'get_command_payload', 'get_user_identity', 'has_game_started', 'normalize_guess',
    'game_logger'
]
