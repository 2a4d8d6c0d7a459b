"""Season totals, leaderboard selection and game-level summaries.

Totals:
    One Totals record per player, summed over exactly the games in which the
    player has a stat line. ``g`` counts those games.

Percentages:
    FG% = SUM(FGM) / SUM(FGA)
    3P% = SUM(3PM) / SUM(3PA)
    Computed from season sums, never averaged from per-game percentages.
    Undefined (NaN) when attempts are zero.

Leaderboard:
    Linear scan for the maximum. NaN compares as negative infinity, and ties
    keep the player that comes first in the player list.
"""

import math
from typing import Iterable, Optional, Sequence

from .constants import COUNTING_FIELDS, METRICS
from .models import Game, Totals


def check_metric(metric: str) -> str:
    """Return ``metric`` if supported, else raise ValueError."""
    if metric not in METRICS:
        raise ValueError(f'Unknown metric: {metric!r} (expected one of {", ".join(METRICS)})')
    return metric


def aggregate(players: Iterable[str], games: Sequence[Game]) -> dict[str, Totals]:
    """
    Fold per-game stat lines into season totals.

    Args:
        players: Season player list (iteration order is kept in the result)
        games: Games, assumed sorted ascending by id

    Returns:
        Dict mapping player name to Totals
    """
    totals = {p: Totals() for p in players}

    for game in games:
        for player, t in totals.items():
            line = game.stat_line(player)
            if line is None:
                continue
            t.g += 1
            for stat in COUNTING_FIELDS:
                setattr(t, stat, getattr(t, stat) + getattr(line, stat))

    return totals


def metric_value(totals: Totals, metric: str) -> float:
    """Value of ``metric`` for one player's totals (ratios as 0-1 fractions)."""
    return getattr(totals, check_metric(metric))


def _sort_key(value: Optional[float]) -> float:
    if value is None or not math.isfinite(value):
        return -math.inf
    return value


def leaderboard_leader(
    totals: dict[str, Totals], metric: str
) -> tuple[Optional[str], Optional[float]]:
    """
    Find the player with the highest value of ``metric``.

    Returns:
        (player, value), or (None, None) if totals is empty. If every player's
        value is undefined the first player is returned with a NaN value.
    """
    check_metric(metric)
    leader: Optional[str] = None
    best: Optional[float] = None

    for player, t in totals.items():
        value = metric_value(t, metric)
        if leader is None or _sort_key(value) > _sort_key(best):
            leader, best = player, value

    return leader, best


def rank_players(totals: dict[str, Totals], metric: str) -> list[tuple[str, float]]:
    """All players ordered by ``metric`` descending, ties in player-list order."""
    check_metric(metric)
    entries = [(player, metric_value(t, metric)) for player, t in totals.items()]
    return sorted(entries, key=lambda e: _sort_key(e[1]), reverse=True)


def game_result(game: Game) -> str:
    """'W', 'L' or 'T' from the final score."""
    if game.diff > 0:
        return 'W'
    if game.diff < 0:
        return 'L'
    return 'T'


def season_record(games: Sequence[Game]) -> tuple[int, int]:
    """(wins, losses); ties count as losses."""
    wins = sum(1 for g in games if g.team_score > g.opponent_score)
    return wins, len(games) - wins


def average_scores(games: Sequence[Game]) -> tuple[float, float]:
    """Average points for and against per game."""
    n = len(games) or 1
    return (
        sum(g.team_score for g in games) / n,
        sum(g.opponent_score for g in games) / n,
    )


def team_shooting(game: Game, players: Iterable[str]) -> Totals:
    """Sum of tracked players' shooting for one game (fgm/fga/tpm/tpa only)."""
    t = Totals()
    for player in players:
        line = game.stat_line(player)
        if line is None:
            continue
        t.fgm += line.fgm
        t.fga += line.fga
        t.tpm += line.tpm
        t.tpa += line.tpa
    return t
