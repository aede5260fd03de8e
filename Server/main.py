"""
ZK Wordle Server - Main Entry Point

This is the main entry point for the ZK Wordle server.
It initializes all services and starts the Flask application.
"""

from zkwordle import create_app
from zkwordle.config import Config, validate_word_list_integrity
from zkwordle.services.game_service import initialize_game_service
from zkwordle.services.session_store import create_session_store
from zkwordle.services.word_service import initialize_word_service
from zkwordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        word_service = initialize_word_service()
        print("✓ Word service initialized successfully")

        session_store = create_session_store(Config)
        print(f"✓ Session store initialized ({Config.SESSION_BACKEND})")

        initialize_game_service(word_service, session_store, Config)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("ZK Wordle Server Starting")

        print(f"\nStarting ZK Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("ZK Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
