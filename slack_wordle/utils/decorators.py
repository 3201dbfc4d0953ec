"""
Request Verification Decorators

Contains the decorator that checks Slack request signatures.
"""

import hashlib
import hmac
import time
from functools import wraps
from flask import request, jsonify, current_app


def compute_slack_signature(signing_secret: str, timestamp: str, body: bytes) -> str:
    """Slack v0 signature: HMAC-SHA256 of ``v0:<timestamp>:<body>``."""
    base_string = b"v0:" + timestamp.encode('utf-8') + b":" + body
    digest = hmac.new(signing_secret.encode('utf-8'), base_string, hashlib.sha256).hexdigest()
    return f"v0={digest}"


def require_slack_signature(f):
    """
    Decorator to require a valid Slack signature on webhook endpoints.

    Verification is skipped when no SLACK_SIGNING_SECRET is configured.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        signing_secret = current_app.config.get('SLACK_SIGNING_SECRET')
        if not signing_secret:
            return f(*args, **kwargs)

        timestamp = request.headers.get('X-Slack-Request-Timestamp')
        signature = request.headers.get('X-Slack-Signature')
        if not timestamp or not signature:
            return jsonify({
                'success': False,
                'error': 'Slack signature headers required'
            }), 401

        try:
            request_age = abs(time.time() - int(timestamp))
        except ValueError:
            return jsonify({
                'success': False,
                'error': 'Invalid request timestamp'
            }), 401

        if request_age > current_app.config.get('SLACK_REQUEST_MAX_AGE_SECONDS', 300):
            return jsonify({
                'success': False,
                'error': 'Request timestamp too old'
            }), 401

        # get_data caches the body so form parsing still works afterwards
        expected = compute_slack_signature(signing_secret, timestamp, request.get_data())
        if not hmac.compare_digest(expected, signature):
            return jsonify({
                'success': False,
                'error': 'Invalid Slack signature'
            }), 401

        return f(*args, **kwargs)

    return decorated_function
