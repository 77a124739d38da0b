from flask import Flask

from shared.directory import create_directory_app
from shared.models import Team
from shared.openapi import TEAM_SCHEMA
from shared.repository import InMemoryRepository, Repository

SEED_TEAMS = (
    Team(id=1, name='Los Angeles Dodgers', division='NL West'),
    Team(id=2, name='New York Yankees', division='AL East'),
)


def create_app(repository: Repository = None) -> Flask:
    """Application factory for the team directory."""
    if repository is None:
        repository = InMemoryRepository(SEED_TEAMS)

    return create_directory_app(
        service_name='team_service',
        resource='team',
        repository=repository,
        schema_name='Team',
        schema=TEAM_SCHEMA,
        title='Team Microservice'
    )
