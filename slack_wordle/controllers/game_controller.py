"""
Game Controller

Handles the Slack slash-command webhook and the service endpoints.
"""

from flask import Blueprint, request, jsonify, current_app
from ..models.game import OutcomeKind
from ..services.slack_formatter import error_reply, not_started_reply, render_outcome
from ..utils.decorators import require_slack_signature
from ..utils.game_logger import game_logger
from ..utils.helpers import get_command_payload, has_game_started, normalize_guess

game_bp = Blueprint('game', __name__)


def _as_response(reply):
    return jsonify(reply) if isinstance(reply, dict) else reply


def _loggable_guess(session, guess):
    """The guess text, withheld when it would reveal the word of an open game."""
    if guess and not session.finished and guess.upper() == session.word:
        return '<secret word>'
    return guess


@game_bp.route('/', methods=['GET'])
def index():
    return "<h1>Hello World!</h1>"


@game_bp.route('/wordle/guess/', methods=['POST'], strict_slashes=False)
@require_slack_signature
def submit_guess():
    """
    Slash-command entry point: score a guess in today's game.

    Slack only shows replies delivered with a 200 status, so expected
    failures and unexpected errors are all answered with plain text.
    """
    game_id = None
    try:
        game_service = current_app.game_service
        payload = get_command_payload()
        guess = normalize_guess(payload.get('text'))
        user_name = payload.get('user_name')

        start_hour = current_app.config['GAME_START_HOUR']
        start_minute = current_app.config['GAME_START_MINUTE']
        now = current_app.clock()
        if not has_game_started(now, start_hour, start_minute):
            reply = not_started_reply(start_hour, start_minute)
            game_logger.log_server_response(request, 'submit_guess', True, reply, game_started=False)
            return reply

        if not user_name:
            error_response = {
                'success': False,
                'error': 'user_name is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        channel_id = current_app.config.get('SHARED_CHANNEL_ID') or payload.get('channel_id') or 'public'
        game_id, session = game_service.get_or_create_game(now.date(), channel_id)

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=_loggable_guess(session, guess)
        )

        outcome = session.submit(user_name, guess)
        reply = render_outcome(outcome, session, user_name)

        game_logger.log_server_response(
            request, 'submit_guess', outcome.ok, reply, game_id,
            outcome=outcome.kind.value
        )

        if outcome.kind == OutcomeKind.ACCEPTED:
            if outcome.is_correct:
                game_logger.log_game_event(
                    game_id, 'game_won', user_name,
                    target_word=session.word, attempts_used=len(outcome.attempts),
                    players=len(session.players)
                )
            elif outcome.is_final_attempt:
                game_logger.log_game_event(
                    game_id, 'attempts_exhausted', user_name,
                    attempts_used=len(outcome.attempts)
                )

        return _as_response(reply)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        reply = error_reply()
        game_logger.log_server_response(request, 'submit_guess', False, reply, game_id)
        return reply


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = current_app.game_service

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_games,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
