"""
Unit tests for the read-only repository and record models.
Tests: coerce_id, InMemoryRepository.list_all, InMemoryRepository.get_by_id, to_dict
"""
import pytest
from shared.models import Player, Team
from shared.repository import InMemoryRepository, coerce_id


class TestCoerceId:
    """Tests for coerce_id."""

    @pytest.mark.parametrize('raw,expected', [
        ('1', 1),
        ('42', 42),
        (' 7', 7),
        ('2abc', 2),
        ('-3', -3),
        (5, 5),
        (5.0, 5),
    ])
    def test_numeric_values(self, raw, expected):
        assert coerce_id(raw) == expected

    @pytest.mark.parametrize('raw', ['abc', '', 'x1', None, 1.5, True, '\u0661', '\u0661\u0662'])
    def test_non_numeric_values(self, raw):
        """Values without leading digits coerce to no id."""
        assert coerce_id(raw) is None


class TestInMemoryRepository:
    """Tests for InMemoryRepository."""

    @pytest.fixture
    def repo(self):
        return InMemoryRepository([
            Team(id=1, name='Los Angeles Dodgers', division='NL West'),
            Team(id=2, name='New York Yankees', division='AL East'),
        ])

    def test_list_all_preserves_order(self, repo):
        assert [t.id for t in repo.list_all()] == [1, 2]

    def test_list_all_returns_copy(self, repo):
        """Mutating the returned list should not affect the repository."""
        teams = repo.list_all()
        teams.clear()
        assert len(repo.list_all()) == 2

    def test_empty_repository(self):
        repo = InMemoryRepository()
        assert repo.list_all() == []
        assert len(repo) == 0
        assert repo.get_by_id('1') is None

    def test_get_by_id_found(self, repo):
        team = repo.get_by_id('2')
        assert team.name == 'New York Yankees'

    def test_get_by_id_accepts_int(self, repo):
        assert repo.get_by_id(1).name == 'Los Angeles Dodgers'

    def test_get_by_id_missing(self, repo):
        assert repo.get_by_id('999') is None

    def test_get_by_id_non_numeric(self, repo):
        """Non-numeric ids are a miss, not an error."""
        assert repo.get_by_id('abc') is None

    def test_get_by_id_leading_digits(self, repo):
        assert repo.get_by_id('1abc').id == 1


class TestModels:
    """Tests for wire shapes of Player and Team."""

    def test_player_to_dict_uses_camel_case(self):
        player = Player(id=1, team_id=1, name='Shohei Ohtani', position='DH/P')
        assert player.to_dict() == {
            'id': 1,
            'teamId': 1,
            'name': 'Shohei Ohtani',
            'position': 'DH/P'
        }

    def test_team_to_dict(self):
        team = Team(id=2, name='New York Yankees', division='AL East')
        assert team.to_dict() == {'id': 2, 'name': 'New York Yankees', 'division': 'AL East'}

    def test_records_are_immutable(self):
        team = Team(id=2, name='New York Yankees', division='AL East')
        with pytest.raises(AttributeError):
            team.name = 'Mets'
