import logging
from typing import Dict, Any

from flask import Flask, jsonify

from shared.openapi import directory_document
from shared.repository import Repository

logger = logging.getLogger(__name__)


def create_directory_app(
    service_name: str,
    resource: str,
    repository: Repository,
    schema_name: str,
    schema: Dict[str, Any],
    title: str
) -> Flask:
    """
    Application factory for a directory service.

    A directory owns one domain and only answers "list all" and
    "get by id". Both directories are built here so they share the
    same contract and error shape.
    """
    app = Flask(service_name)
    app.json.sort_keys = False
    app.repository = repository

    not_found_message = f'{resource.capitalize()} not found'
    document = directory_document(title, resource, schema_name, schema, f'{resource}s')

    @app.route('/', methods=['GET'])
    def list_records():
        """Return the full record list; filtering is left to consumers."""
        records = app.repository.list_all()
        return jsonify([r.to_dict() for r in records])

    @app.route('/<record_id>', methods=['GET'])
    def get_record(record_id: str):
        record = app.repository.get_by_id(record_id)
        if record is None:
            logger.debug(f"{service_name}: no {resource} with id {record_id!r}")
            return jsonify({'error': not_found_message}), 404

        return jsonify(record.to_dict())

    @app.route('/openapi.json')
    def openapi():
        return jsonify(document)

    @app.route('/health')
    def health_check():
        return jsonify({
            'status': 'healthy',
            'service': service_name,
            'records': len(app.repository.list_all())
        })

    return app
