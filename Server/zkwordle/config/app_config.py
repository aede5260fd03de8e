"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Proof Settings
    # The session salt is permanent per deployment; the daily salt is formatted with the date key
    ZK_SALT = os.getenv('ZK_SALT', 'wrdl-zk-salt-2025-permanent')
    DAILY_SALT_TEMPLATE = os.getenv('DAILY_SALT_TEMPLATE', 'wordle-{date}-salt')

    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', 6))

    # Session Storage Settings
    SESSION_BACKEND = os.getenv('SESSION_BACKEND', 'memory')  # "memory" or "mongo"
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'zk_wordle')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


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
    SESSION_BACKEND = 'memory'
    ZK_SALT = 'test-salt'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
