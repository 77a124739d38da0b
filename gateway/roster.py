import logging
from typing import Any, Dict, List, Tuple

from .upstream import DirectoryClient

logger = logging.getLogger(__name__)

TEAM_NOT_FOUND = 'Team not found'


def canonical_id(value: Any) -> str:
    """
    Render an id as the string both directories agree on, so that 1,
    1.0 and "1" all join to the same team.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def filter_roster(players: Any, team_id: Any) -> List[Dict[str, Any]]:
    """Players on ``team_id`` in directory order; a non-list payload is an empty roster."""
    if not isinstance(players, list):
        return []

    wanted = canonical_id(team_id)
    return [
        p for p in players
        if isinstance(p, dict) and canonical_id(p.get('teamId')) == wanted
    ]


class RosterComposer:
    """
    Builds the roster view by joining a team with its players.

    The team is resolved first; the player directory is only called once
    the team is known to exist.
    """

    def __init__(self, teams: DirectoryClient, players: DirectoryClient):
        self.teams = teams
        self.players = players

    def compose(self, team_id: Any) -> Tuple[Dict[str, Any], int]:
        """Return ``(body, status)`` for the roster of ``team_id``."""
        team = self.teams.get_by_id(team_id)

        if isinstance(team, dict) and team.get('error'):
            # Relabelled on purpose; proxy routes forward the upstream error instead.
            logger.info(f"Roster requested for unknown team {team_id!r}")
            return {'error': TEAM_NOT_FOUND}, 404

        players = self.players.list_all()
        if not isinstance(players, list):
            logger.warning(f"Player directory returned {type(players).__name__}, using empty roster")

        roster = filter_roster(players, team_id)
        logger.info(f"Composed roster for team {team_id!r}: {len(roster)} players")

        return {'team': team, 'roster': roster}, 200
