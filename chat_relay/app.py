"""Flask application relaying user chat messages to an LLM and a chat platform."""

import argparse
import logging
import sys
from typing import Optional

from flask import Flask
from flask_cors import CORS

from chat_relay.conf.config import Config
from chat_relay.src.api import setup_api
from chat_relay.src.services import (
    BaseChatPlatformService,
    BaseLLMService,
    PersistenceService,
    create_chat_platform_service,
    create_conversation_assembler,
    create_identity_service,
    create_llm_service,
    create_persistence_service,
)

# Logging is configured in chat_relay/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    llm_service: Optional[BaseLLMService] = None,
    chat_platform_service: Optional[BaseChatPlatformService] = None,
    persistence_service: Optional[PersistenceService] = None,
) -> Flask:
    """Create and configure the Flask application with its services.

    Services that are not passed in are built from Config.
    """
    logger.info("Starting application setup...")

    # Create Flask app
    app = Flask(__name__)
    CORS(app, origins=Config.CORS_ORIGINS)

    # Create services using factory methods
    if llm_service is None:
        llm_service = create_llm_service()
        if not llm_service:
            raise ValueError(f"Failed to create {Config.LLM_SERVICE} LLM service")

    if chat_platform_service is None:
        logger.info("Creating chat platform service")
        chat_platform_service = create_chat_platform_service()

    if persistence_service is None:
        logger.info("Creating persistence service")
        persistence_service = create_persistence_service()

    identity_service = create_identity_service(chat_platform_service, persistence_service)
    conversation_assembler = create_conversation_assembler(persistence_service)

    # Set up API routes
    logger.info("Setting up API routes")
    setup_api(
        app,
        identity_service,
        conversation_assembler,
        llm_service,
        persistence_service,
        chat_platform_service,
    )
    logger.info("API routes configured")

    logger.info("Application setup complete")
    return app


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run the chat relay server (--port, --llm, --debug, --init-db)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.FLASK_PORT,
        help=f"Port to listen on (default: {Config.FLASK_PORT})",
    )
    parser.add_argument(
        "--llm",
        type=str,
        choices=Config.VALID_LLM_SERVICES,
        default=Config.LLM_SERVICE,
        help=f"LLM service to use (default: {Config.LLM_SERVICE})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run Flask in debug mode",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create the database tables and exit",
    )

    args = parser.parse_args(argv)

    if args.init_db:
        create_persistence_service(create_tables=True)
        logger.info("Database initialized")
        return

    # Set configuration from command line arguments
    Config.LLM_SERVICE = args.llm
    Config.FLASK_PORT = args.port
    logger.info(f"Using LLM service: {Config.LLM_SERVICE}")

    try:
        app = create_app()
    except Exception as e:
        logger.error(f"Failed to start the chat relay: {str(e)}")
        sys.exit(1)

    logger.info(f"Server is running on port {Config.FLASK_PORT}")
    app.run(host="0.0.0.0", port=Config.FLASK_PORT, debug=args.debug)


if __name__ == "__main__":
    main()
