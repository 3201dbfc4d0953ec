"""
Game Logger Module for the Slack Wordle service

This module provides structured logging for slash-command requests, the
replies sent back to Slack, and game events.
"""

import logging
import json
import os
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path
from .helpers import get_user_identity


def daily_log_path(log_dir: Path, day) -> Path:
    return log_dir / f"game_log_{day.strftime('%Y-%m-%d')}.log"


class DailyFileHandler(logging.FileHandler):
    """
    File handler writing each record to the log file of the day it was created.

    A long-running server switches to a new game_log_YYYY-MM-DD.log file with
    the first record after midnight.
    """

    def __init__(self, log_dir: Path, encoding: str = 'utf-8'):
        self.log_dir = Path(log_dir)
        self.current_day = datetime.now().date()
        super().__init__(daily_log_path(self.log_dir, self.current_day), encoding=encoding)

    def emit(self, record):
        record_day = datetime.fromtimestamp(record.created).date()
        if record_day != self.current_day:
            # handle() already holds the handler lock
            if self.stream:
                self.stream.close()
                self.stream = None
            self.current_day = record_day
            self.baseFilename = os.path.abspath(daily_log_path(self.log_dir, record_day))
        super().emit(record)


class GameLogger:
    """
    Centralized logging system for the Slack Wordle service.

    Features:
    - User action tracking with Slack user/channel identification
    - Server response logging
    - Game event logging
    - JSON structured logs for easy parsing

    Logs go to the console (warnings and above) until ``configure`` adds a
    daily log file.
    """

    def __init__(self, name: str = 'slack_wordle'):
        self.log_dir: Optional[Path] = None
        self.logger = self._setup_logger(name)

    def _setup_logger(self, name: str) -> logging.Logger:
        """Setup the game logger with a console handler."""
        logger = logging.getLogger(name)
        logger.setLevel(logging.INFO)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        """
        Apply logging settings from the app configuration.

        Args:
            log_dir: Directory for the daily log file; falsy keeps console only
            level: Minimum level written to the log file
        """
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self.logger.removeHandler(handler)
                handler.close()

        if not log_dir:
            self.log_dir = None
            return

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = DailyFileHandler(self.log_dir)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(file_handler)

    def _log_file(self) -> Path:
        return daily_log_path(self.log_dir, datetime.now().date())

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract user identity information from a slash-command request."""
        return get_user_identity(request)

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'submit_guess')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)

        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, user_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Any,
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Reply being returned to Slack
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)

        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_name: Optional[str],
                       **kwargs):
        """
        Log game-specific events (game created, won, attempts exhausted).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'attempts_exhausted')
            user_name: Slack user the event concerns, None for system events
            **kwargs: Additional game details
        """
        user_info = {'user_name': user_name, 'user_id': None, 'channel_id': None, 'user_ip': 'system'}

        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        user_info = self._get_user_identity(request)

        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, user_info, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Any) -> Any:
        """Summarize Slack payloads instead of logging every block."""
        if isinstance(data, str):
            return data
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        if 'blocks' in data:
            return {
                'response_type': data.get('response_type'),
                'blocks_count': len(data['blocks'])
            }
        if 'text' in data:
            # final-attempt replies carry the answer while the game is still open
            return {
                'type': data.get('type'),
                'text_length': len(data['text'])
            }
        return data.copy()

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events (used by the health check)."""
        if self.log_dir is None:
            return {'error': 'File logging is disabled'}

        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        try:
            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger()
