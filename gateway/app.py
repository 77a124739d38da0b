import os
import logging
from typing import Optional

import requests
from flask import Flask, jsonify, Response

from .config import config
from .roster import RosterComposer
from .upstream import DirectoryClient, TransportFailure, UpstreamResponse
from shared.openapi import gateway_document

logger = logging.getLogger(__name__)


def create_app(config_name: str = None, session: Optional[requests.Session] = None) -> Flask:
    """Application factory for the gateway."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.json.sort_keys = False

    timeout = app.config['UPSTREAM_TIMEOUT']

    # Store clients on app for access in routes
    app.players = DirectoryClient(
        'player_service', app.config['PLAYER_SERVICE_URL'], timeout=timeout, session=session
    )
    app.teams = DirectoryClient(
        'team_service', app.config['TEAM_SERVICE_URL'], timeout=timeout, session=session
    )
    app.rosters = RosterComposer(teams=app.teams, players=app.players)

    register_error_handlers(app)
    register_api_routes(app)

    return app


def passthrough(upstream: UpstreamResponse) -> Response:
    """Relay a directory response without touching body or status."""
    return Response(
        upstream.content,
        status=upstream.status_code,
        content_type=upstream.content_type
    )


def register_error_handlers(app: Flask):

    @app.errorhandler(TransportFailure)
    def handle_transport_failure(e: TransportFailure):
        logger.error(f"Upstream failure: {e}")
        return jsonify({'error': f'Upstream service unavailable: {e.service}'}), 502


def register_api_routes(app: Flask):
    """Register API routes."""

    # ==================== Players (passthrough) ====================

    @app.route('/players', methods=['GET'])
    def api_list_players():
        """Get all players."""
        return passthrough(app.players.fetch_all())

    @app.route('/players/<player_id>', methods=['GET'])
    def api_get_player(player_id: str):
        """Get a player by ID. Upstream 404s are forwarded as-is."""
        return passthrough(app.players.fetch_by_id(player_id))

    # ==================== Teams (passthrough) ====================

    @app.route('/teams', methods=['GET'])
    def api_list_teams():
        """Get all teams."""
        return passthrough(app.teams.fetch_all())

    @app.route('/teams/<team_id>', methods=['GET'])
    def api_get_team(team_id: str):
        """Get a team by ID. Upstream 404s are forwarded as-is."""
        return passthrough(app.teams.fetch_by_id(team_id))

    # ==================== Composition ====================

    @app.route('/teams/<team_id>/roster', methods=['GET'])
    def api_team_roster(team_id: str):
        """Get team roster with team details."""
        body, status = app.rosters.compose(team_id)
        return jsonify(body), status

    # ==================== Docs & Health ====================

    @app.route('/openapi.json')
    def api_openapi():
        return jsonify(gateway_document())

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'service': 'gateway',
            'upstreams': {
                'player_service': app.players.base_url,
                'team_service': app.teams.base_url
            }
        })
