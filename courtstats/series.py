"""Per-player trend series across the season."""

import math
from typing import Sequence

from .aggregator import check_metric
from .constants import RATIO_METRICS
from .models import Game, SeriesPoint, StatLine, TrendData


def point_value(line: StatLine, metric: str) -> float:
    """
    Value of ``metric`` for one game.

    Ratio metrics are scaled to 0-100 and are NaN when there were no
    attempts; counting metrics are the raw field value.
    """
    if metric in RATIO_METRICS:
        made, attempted = RATIO_METRICS[metric]
        attempts = getattr(line, attempted)
        if not attempts:
            return math.nan
        return getattr(line, made) / attempts * 100
    return float(getattr(line, metric))


def build_series(players: Sequence[str], games: Sequence[Game], metric: str) -> TrendData:
    """
    Build one series per player for ``metric``.

    ``x`` is the 1-based position of the game in the full chronological game
    list, so games a player missed leave gaps rather than shifting later
    points left. Missed games produce no point at all.

    Args:
        players: Players to build series for
        games: Games sorted ascending by id
        metric: One of METRICS

    Returns:
        TrendData with series per player and the total game count
    """
    check_metric(metric)
    series: dict[str, list[SeriesPoint]] = {p: [] for p in players}

    for index, game in enumerate(games, start=1):
        for player in players:
            line = game.stat_line(player)
            if line is None:
                continue
            series[player].append(SeriesPoint(x=index, y=point_value(line, metric), game_id=game.id))

    return TrendData(series=series, game_count=len(games))


def visible_points(points: Sequence[SeriesPoint]) -> list[SeriesPoint]:
    """Drop points whose value is undefined."""
    return [p for p in points if math.isfinite(p.y)]
