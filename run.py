#!/usr/bin/env python3
"""
Entry point for the MLB gateway and its directory services.

Usage:
    python run.py                    # Run the gateway (default)
    python run.py gateway            # Run the gateway explicitly
    python run.py players            # Run the player directory
    python run.py teams              # Run the team directory

Environment Variables:
    FLASK_ENV: development or production (default: development)
    GATEWAY_PORT / PLAYER_SERVICE_PORT / TEAM_SERVICE_PORT: 3000 / 3001 / 3002
    PLAYER_SERVICE_URL / TEAM_SERVICE_URL: where the gateway finds the directories
    LOG_LEVEL: logging level (default: INFO)
"""
import os
import sys
import logging

from gateway.config import config


def get_config():
    return config[os.getenv('FLASK_ENV', 'development')]


def configure_logging():
    logging.basicConfig(
        level=get_config().LOG_LEVEL,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )


def run_gateway():
    """Run the gateway service."""
    from gateway.app import create_app

    app = create_app()
    port = app.config['GATEWAY_PORT']

    logging.getLogger(__name__).info(f"Starting Gateway on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'], threaded=True)


def run_directory(name: str):
    """Run one of the directory services."""
    if name == 'players':
        from player_service.app import create_app
        port = get_config().PLAYER_SERVICE_PORT
    else:
        from team_service.app import create_app
        port = get_config().TEAM_SERVICE_PORT

    app = create_app()

    logging.getLogger(__name__).info(f"Starting {name} directory on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=get_config().DEBUG, threaded=True)


if __name__ == '__main__':
    mode = sys.argv[1] if len(sys.argv) > 1 else 'gateway'
    configure_logging()

    if mode == 'gateway':
        run_gateway()
    elif mode in ('players', 'teams'):
        run_directory(mode)
    else:
        print(f"Unknown mode: {mode}")
        print("Usage: python run.py [gateway|players|teams]")
        sys.exit(1)
