"""
Controllers Package

HTTP endpoints of the Slack webhook.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
