"""
OpenAPI 3 documents for the gateway and the directory services.

The gateway keeps its own copy of every schema so it can document the
composed roster view independently of the directories it calls.
"""
from typing import Dict, Any, Optional

OPENAPI_VERSION = '3.0.3'

PLAYER_SCHEMA = {
    'type': 'object',
    'properties': {
        'id': {'type': 'integer'},
        'teamId': {'type': 'integer'},
        'name': {'type': 'string'},
        'position': {'type': 'string'},
    },
}

TEAM_SCHEMA = {
    'type': 'object',
    'properties': {
        'id': {'type': 'integer'},
        'name': {'type': 'string'},
        'division': {'type': 'string'},
    },
}

ROSTER_SCHEMA = {
    'type': 'object',
    'properties': {
        'team': {'$ref': '#/components/schemas/Team'},
        'roster': {
            'type': 'array',
            'items': {'$ref': '#/components/schemas/Player'},
        },
    },
}

ERROR_SCHEMA = {
    'type': 'object',
    'properties': {
        'error': {'type': 'string'},
    },
}

ID_PARAMETER = {
    'name': 'id',
    'in': 'path',
    'required': True,
    'schema': {'type': 'integer'},
}


def _ref(name: str) -> Dict[str, str]:
    return {'$ref': f'#/components/schemas/{name}'}


def _json(schema: Dict[str, Any], description: str) -> Dict[str, Any]:
    return {
        'description': description,
        'content': {'application/json': {'schema': schema}},
    }


def list_operation(schema_name: str, description: str, tag: str) -> Dict[str, Any]:
    return {
        'get': {
            'description': description,
            'tags': [tag],
            'responses': {
                '200': _json({'type': 'array', 'items': _ref(schema_name)}, 'OK'),
            },
        }
    }


def get_operation(schema_name: str, description: str, tag: str) -> Dict[str, Any]:
    return {
        'get': {
            'description': description,
            'tags': [tag],
            'parameters': [ID_PARAMETER],
            'responses': {
                '200': _json(_ref(schema_name), 'OK'),
                '404': _json(_ref('Error'), 'Not found'),
            },
        }
    }


def build_document(
    title: str,
    paths: Dict[str, Any],
    schemas: Dict[str, Any],
    version: str = '1.0.0',
    description: Optional[str] = None
) -> Dict[str, Any]:
    """Assemble a complete OpenAPI document."""
    info = {'title': title, 'version': version}
    if description:
        info['description'] = description

    return {
        'openapi': OPENAPI_VERSION,
        'info': info,
        'paths': paths,
        'components': {'schemas': dict(schemas)},
    }


def directory_document(title: str, resource: str, schema_name: str,
                       schema: Dict[str, Any], tag: str) -> Dict[str, Any]:
    """Document for a directory service exposing ``GET /`` and ``GET /{id}``."""
    paths = {
        '/': list_operation(schema_name, f'Get all {resource}s', tag),
        '/{id}': get_operation(schema_name, f'Get a {resource} by ID', tag),
    }
    return build_document(title, paths, {schema_name: schema, 'Error': ERROR_SCHEMA})


def gateway_document(title: str = 'MLB Gateway') -> Dict[str, Any]:
    roster = get_operation('Roster', 'Get team roster with team details', 'teams')
    paths = {
        '/players': list_operation('Player', 'Get all players', 'players'),
        '/players/{id}': get_operation('Player', 'Get a player by ID', 'players'),
        '/teams': list_operation('Team', 'Get all teams', 'teams'),
        '/teams/{id}': get_operation('Team', 'Get a team by ID', 'teams'),
        '/teams/{id}/roster': roster,
    }
    schemas = {
        'Player': PLAYER_SCHEMA,
        'Team': TEAM_SCHEMA,
        'Roster': ROSTER_SCHEMA,
        'Error': ERROR_SCHEMA,
    }
    return build_document(
        title,
        paths,
        schemas,
        description='Single entry point composing the player and team directories.'
    )
