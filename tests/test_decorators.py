import time

import pytest

from slack_wordle import create_app
from slack_wordle.config import TestingConfig
from slack_wordle.utils.decorators import compute_slack_signature

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
BODY = "text=hello&user_name=csk&channel_id=C123"


class SignedConfig(TestingConfig):
    SLACK_SIGNING_SECRET = SECRET
    SLACK_REQUEST_MAX_AGE_SECONDS = 300


@pytest.fixture
def signed_client(game_service, game_day):
    return create_app(SignedConfig, game_service=game_service, clock=lambda: game_day).test_client()


def post(client, headers):
    return client.post(
        "/wordle/guess/",
        data=BODY,
        content_type="application/x-www-form-urlencoded",
        headers=headers,
    )


def signed_headers(timestamp=None, body=BODY):
    timestamp = str(int(time.time()) if timestamp is None else timestamp)
    return {
        "X-Slack-Request-Timestamp": timestamp,
        "X-Slack-Signature": compute_slack_signature(SECRET, timestamp, body.encode("utf-8")),
    }


def test_signature_format():
    signature = compute_slack_signature(SECRET, "1531420618", b"token=abc")
    assert signature.startswith("v0=")
    assert len(signature) == 3 + 64


def test_valid_signature_is_accepted(signed_client):
    response = post(signed_client, signed_headers())
    assert response.status_code == 200
    assert response.get_json()["text"].startswith("Your guesses")


def test_missing_headers_are_rejected(signed_client):
    response = post(signed_client, {})
    assert response.status_code == 401
    assert response.get_json() == {"success": False, "error": "Slack signature headers required"}


def test_tampered_body_is_rejected(signed_client):
    response = post(signed_client, signed_headers(body="text=novel&user_name=csk&channel_id=C123"))
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid Slack signature"


def test_stale_timestamp_is_rejected(signed_client):
    response = post(signed_client, signed_headers(timestamp=int(time.time()) - 3600))
    assert response.status_code == 401
    assert response.get_json()["error"] == "Request timestamp too old"


def test_non_numeric_timestamp_is_rejected(signed_client):
    headers = signed_headers()
    headers["X-Slack-Request-Timestamp"] = "yesterday"
    assert post(signed_client, headers).status_code == 401


def test_verification_is_skipped_without_secret(client):
    assert post(client, {}).status_code == 200
