"""Season file loading.

This is the data-loading boundary: the season file is validated here (schema
plus invariants) so the aggregation and chart code can assume clean input.
"""

import logging
from pathlib import Path
from typing import Any

from .models import Game, Season, StatLine
from .schemas import SeasonFile
from .utils import load_json
from .validators import validate_season

logger = logging.getLogger('courtstats.store')


def season_from_schema(data: SeasonFile) -> Season:
    """Convert a validated SeasonFile into a Season with games sorted by id.

    Raises:
        ValueError: If the season violates an invariant (e.g. duplicate game ids)
    """
    games = [
        Game(
            id=g.id,
            date=g.date,
            team_score=g.team_score,
            opponent_score=g.opponent_score,
            players={name: StatLine(**line.model_dump()) for name, line in g.players.items()},
        )
        for g in data.games
    ]

    errors, warnings = validate_season(data.players, games)
    for warning in warnings:
        logger.warning(warning)
    if errors:
        for error in errors:
            logger.error(error)
        raise ValueError('Invalid season data:\n' + '\n'.join(errors))

    games.sort(key=lambda g: g.id)
    logger.info(f'Loaded {len(games)} games for {len(data.players)} players')
    return Season(players=list(data.players), games=games)


def season_from_dict(data: dict[str, Any]) -> Season:
    """Build a Season from an already-deserialized season dict.

    Raises:
        ValueError: If the data fails schema or invariant validation
    """
    return season_from_schema(SeasonFile.model_validate(data))


def load_season(path: Path | str) -> Season:
    """
    Load and validate a season file (games.json).

    Args:
        path: Path to the season JSON file

    Returns:
        Season with games sorted ascending by id

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is malformed
        ValueError: If schema or invariant validation fails
    """
    data = load_json(path, schema=SeasonFile)
    return season_from_schema(data)
