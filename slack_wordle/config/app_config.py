"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env (optional)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3000))

    # Slack Settings
    SLACK_SIGNING_SECRET = os.getenv('SLACK_SIGNING_SECRET')  # unset disables verification
    SLACK_REQUEST_MAX_AGE_SECONDS = int(os.getenv('SLACK_REQUEST_MAX_AGE_SECONDS', 300))

    # Game Settings
    SHARED_CHANNEL_ID = os.getenv('SHARED_CHANNEL_ID', 'public')  # empty -> one game per channel
    GAME_START_HOUR = int(os.getenv('GAME_START_HOUR', 9))
    GAME_START_MINUTE = int(os.getenv('GAME_START_MINUTE', 30))
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', 3))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')  # empty -> console only


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    SLACK_SIGNING_SECRET = None
    SHARED_CHANNEL_ID = 'public'
    MAX_ATTEMPTS = 3
    LOG_DIR = ''


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
