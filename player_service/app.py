from flask import Flask

from shared.directory import create_directory_app
from shared.models import Player
from shared.openapi import PLAYER_SCHEMA
from shared.repository import InMemoryRepository, Repository

# In-memory seed data; replace the repository for persistent storage.
SEED_PLAYERS = (
    Player(id=1, team_id=1, name='Shohei Ohtani', position='DH/P'),
    Player(id=2, team_id=1, name='Mookie Betts', position='2B'),
    Player(id=3, team_id=2, name='Aaron Judge', position='RF'),
)


def create_app(repository: Repository = None) -> Flask:
    """Application factory for the player directory."""
    if repository is None:
        repository = InMemoryRepository(SEED_PLAYERS)

    return create_directory_app(
        service_name='player_service',
        resource='player',
        repository=repository,
        schema_name='Player',
        schema=PLAYER_SCHEMA,
        title='Player Microservice'
    )
