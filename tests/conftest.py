"""Shared fixtures: small seasons built from plain dicts."""

import pytest

from courtstats.models import Game, Season
from courtstats.store import season_from_dict
from factories import make_game, make_line


@pytest.fixture
def g1() -> Game:
    """G1 from the reference scenario: A scores 20 on 8-15 shooting."""
    return make_game(
        1,
        {'A': make_line(pts=20, reb=5, ast=3, stl=1, blk=0, fgm=8, fga=15, tpm=2, tpa=5)},
        team_score=100,
        opponent_score=90,
        day=5,
    )


@pytest.fixture
def g2() -> Game:
    """G2 from the reference scenario: A scores 10 on 4-10 shooting."""
    return make_game(
        2,
        {'A': make_line(pts=10, reb=2, ast=1, stl=0, blk=1, fgm=4, fga=10, tpm=0, tpa=3)},
        team_score=95,
        opponent_score=98,
        day=12,
    )


@pytest.fixture
def season_data() -> dict:
    """Raw season file contents (JSON shape, games deliberately out of order)."""
    return {
        'players': ['A', 'B', 'C'],
        'games': [
            {
                'id': 3,
                'date': '2025-01-19',
                'for': 70,
                'against': 70,
                'players': {
                    'A': {'pts': 12, 'reb': 3, 'ast': 2, 'stl': 0, 'blk': 0,
                          'fgm': 5, 'fga': 11, 'tpm': 2, 'tpa': 4},
                    'C': {'pts': 4, 'reb': 8, 'ast': 0, 'stl': 1, 'blk': 2,
                          'fgm': 2, 'fga': 2, 'tpm': 0, 'tpa': 0},
                },
            },
            {
                'id': 1,
                'date': '2025-01-05',
                'for': 100,
                'against': 90,
                'players': {
                    'A': {'pts': 20, 'reb': 5, 'ast': 3, 'stl': 1, 'blk': 0,
                          'fgm': 8, 'fga': 15, 'tpm': 2, 'tpa': 5},
                    'B': {'pts': 6, 'reb': 1, 'ast': 4, 'stl': 2, 'blk': 0,
                          'fgm': 3, 'fga': 4, 'tpm': 0, 'tpa': 1},
                },
            },
            {
                'id': 2,
                'date': '2025-01-12',
                'for': 95,
                'against': 98,
                'players': {
                    'A': {'pts': 10, 'reb': 2, 'ast': 1, 'stl': 0, 'blk': 1,
                          'fgm': 4, 'fga': 10, 'tpm': 0, 'tpa': 3},
                    'B': {'pts': 8, 'reb': 2, 'ast': 5, 'stl': 0, 'blk': 0,
                          'fgm': 4, 'fga': 6, 'tpm': 0, 'tpa': 0},
                },
            },
        ],
    }


@pytest.fixture
def season(season_data) -> Season:
    return season_from_dict(season_data)
