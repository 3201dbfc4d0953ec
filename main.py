"""
Slack Wordle Server - Main Entry Point

This is the main entry point for the Slack Wordle webhook.
It builds the session store, validates the word pool and starts the Flask application.
"""

import os
from slack_wordle import create_app
from slack_wordle.config import config, validate_word_pool_integrity
from slack_wordle.services.game_service import GameService
from slack_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]
    try:
        print("Initializing services...")

        validate_word_pool_integrity()
        print("✓ Word pool validated")

        game_service = GameService(max_attempts=config_class.MAX_ATTEMPTS)
        print(f"✓ Game service initialized with {len(game_service.word_pool)} words")

        print("Creating Flask application...")
        app = create_app(config_class, game_service=game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Slack Wordle Server starting")

        print(f"\nStarting Slack Wordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Signature verification: {bool(config_class.SLACK_SIGNING_SECRET)}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG, threaded=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Slack Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
