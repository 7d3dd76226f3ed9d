"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the daily puzzle server.
It initializes the game service and starts the Flask application.
"""

import os

from daily_wordle import create_app
from daily_wordle.config import config, validate_word_list_integrity
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Initializing services...")

        validate_word_list_integrity()
        game_service = initialize_game_service(config_class)
        print(f"✓ Game service initialized ({len(game_service.selector.word_list)} words, "
              f"{config_class.STORE_BACKEND} store)")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Daily Wordle Server Starting")

        print(f"\nStarting Daily Wordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
