"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import datetime, time
from typing import Any, Dict, Optional
from flask import request


def get_command_payload(request_obj=None) -> Dict[str, Any]:
    """
    Read a slash-command body.

    Slack posts form-encoded fields; JSON bodies are accepted for manual
    testing.
    """
    if request_obj is None:
        request_obj = request

    if request_obj.form:
        return request_obj.form.to_dict()
    return request_obj.get_json(silent=True) or {}


def normalize_guess(text: Optional[str]) -> Optional[str]:
    """Strip and upper-case the guess text; None when the field is absent."""
    if text is None:
        return None
    return text.strip().upper()


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract Slack user identity information from request."""
    if request_obj is None:
        request_obj = request

    payload = {}
    if getattr(request_obj, 'form', None):
        payload = request_obj.form
    elif getattr(request_obj, 'is_json', False):
        payload = request_obj.get_json(silent=True) or {}

    return {
        'user_name': payload.get('user_name'),
        'user_id': payload.get('user_id'),
        'channel_id': payload.get('channel_id'),
        'user_ip': request_obj.remote_addr or 'unknown'
    }


def has_game_started(now: datetime, start_hour: int, start_minute: int) -> bool:
    """True once the local time reaches the daily start time."""
    return now.time() >= time(start_hour, start_minute)
