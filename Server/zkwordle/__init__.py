"""
ZK Wordle Server Application Package

A Wordle server that commits to the secret word with salted position
hashes, so guesses can be checked by the server with per-letter proofs
or by the client against the published hashes.
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.zk_controller import zk_bp
    from .controllers.word_controller import word_bp

    app.register_blueprint(zk_bp, url_prefix='/api')
    app.register_blueprint(word_bp, url_prefix='/api')

    from .utils.game_logger import game_logger

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        game_logger.log_error(request, error, request.endpoint or 'unknown')
        return jsonify({'error': 'Internal server error'}), 500

    return app
