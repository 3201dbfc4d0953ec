from datetime import datetime

import pytest

from slack_wordle import create_app
from slack_wordle.config import TestingConfig
from slack_wordle.services.game_service import GameService

GAME_DAY = datetime(2026, 10, 19, 10, 0)


@pytest.fixture
def game_day():
    return GAME_DAY


@pytest.fixture
def game_service():
    return GameService(word_pool=["novel"])


@pytest.fixture
def app(game_service):
    return create_app(TestingConfig, game_service=game_service, clock=lambda: GAME_DAY)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def public_game_id():
    return GameService.make_game_id(GAME_DAY.date(), "public")
