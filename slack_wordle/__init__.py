"""
Slack Wordle Application Package

A daily multiplayer Wordle game played through a Slack slash command.
"""

from datetime import datetime
from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, game_service=None, clock=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Session store shared by the requests; a new one is
            created from the configuration when omitted
        clock: Callable returning the current local datetime

    Returns:
        Flask application instance with all extensions initialized
    """
    from .services.game_service import GameService
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)

    app.game_service = game_service or GameService(max_attempts=app.config['MAX_ATTEMPTS'])
    app.clock = clock or datetime.now

    return app
