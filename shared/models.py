from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Player:
    id: int
    team_id: int
    name: str
    position: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'teamId': self.team_id,
            'name': self.name,
            'position': self.position
        }


@dataclass(frozen=True)
class Team:
    id: int
    name: str
    division: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'division': self.division
        }
