"""Page models for the overview, games and player views.

Each function turns a Season into plain rows and strings ready for a table
renderer. Cells that cannot be shown (player did not play, zero attempts)
use the MISSING placeholder.
"""

import math
from typing import Any, Optional
from urllib.parse import quote

import polars as pl

from .aggregator import (
    aggregate,
    average_scores,
    game_result,
    leaderboard_leader,
    season_record,
    team_shooting,
)
from .constants import (
    BOX_SCORE_HEADERS,
    GAME_LIST_HEADERS,
    GAME_LOG_HEADERS,
    METRIC_LABELS,
    MISSING,
    PLAYER_GAMES_HEADERS,
    RATIO_METRICS,
    TOTALS_HEADERS,
)
from .models import Game, Season, Totals


def fmt_pct(value: Optional[float]) -> str:
    """0.48 -> '48.0%'; undefined -> MISSING."""
    if value is None or not math.isfinite(value):
        return MISSING
    return f'{value * 100:.1f}%'


def fmt1(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return MISSING
    return f'{value:.1f}'


def game_label(game: Game) -> str:
    """e.g. 'Jan 5 • W 100-90'."""
    date_label = f'{game.date.strftime("%b")} {game.date.day}'
    return f'{date_label} • {game_result(game)} {game.team_score}-{game.opponent_score}'


def player_href(name: str) -> str:
    return f'player.html?name={quote(name, safe="")}'


def game_href(game_id: int) -> str:
    return f'games.html?game={game_id}'


def leaderboard_display(totals: dict[str, Totals], metric: str) -> dict[str, str]:
    """Leader name and formatted value for ``metric``."""
    name, value = leaderboard_leader(totals, metric)
    if metric in RATIO_METRICS:
        shown = fmt_pct(value)
    elif value is not None and math.isfinite(value):
        shown = str(value)
    else:
        shown = MISSING
    return {
        'metric': metric,
        'label': METRIC_LABELS[metric],
        'leader': name if name is not None else MISSING,
        'value': shown,
    }


def totals_rows(season: Season, totals: dict[str, Totals] | None = None) -> list[list[Any]]:
    """Season totals table: counting stats with per-game averages, FG% and 3P%."""
    totals = totals if totals is not None else aggregate(season.players, season.games)
    rows = []
    for player in season.players:
        t = totals[player]
        rows.append([
            player,
            t.g,
            t.pts, fmt1(t.per_game('pts')),
            t.reb, fmt1(t.per_game('reb')),
            t.ast, fmt1(t.per_game('ast')),
            t.stl, fmt1(t.per_game('stl')),
            t.blk, fmt1(t.per_game('blk')),
            fmt_pct(t.fgp),
            fmt_pct(t.tpp),
        ])
    return rows


def game_log_rows(games: list[Game]) -> list[list[Any]]:
    return [
        [g.id, g.date.isoformat(), f'{g.team_score}-{g.opponent_score}', g.diff, game_result(g)]
        for g in games
    ]


def box_score_rows(players: list[str], game: Game) -> list[list[Any]]:
    """
    One row per season player, sorted by points descending.

    Players without a stat line show MISSING and sort as zero points.
    """
    rows = []
    for player in players:
        line = game.stat_line(player)
        if line is None:
            rows.append([player] + [MISSING] * (len(BOX_SCORE_HEADERS) - 1))
            continue
        rows.append([
            player,
            line.pts,
            line.reb,
            line.ast,
            line.stl,
            line.blk,
            f'{line.fgm}-{line.fga}',
            fmt_pct(line.fgp),
            f'{line.tpm}-{line.tpa}',
            fmt_pct(line.tpp),
        ])

    rows.sort(key=lambda r: r[1] if isinstance(r[1], int) else 0, reverse=True)
    return rows


def resolve_game(season: Season, game_id: Optional[int]) -> Optional[Game]:
    """Requested game, or the most recent game when no id is given."""
    if game_id is None:
        return season.games[-1] if season.games else None
    return season.game(game_id)


def overview(season: Season, metric: str = 'pts', game_id: Optional[int] = None) -> dict[str, Any]:
    """Overview page: summary cards, totals, game log, leaderboard and one box score."""
    games = season.games
    wins, losses = season_record(games)
    avg_for, avg_against = average_scores(games)
    totals = aggregate(season.players, games)

    if game_id is None and games:
        game_id = games[0].id
    game = season.game(game_id) if game_id is not None else None

    return {
        'subtitle': f'{len(games)} games tracked • Record {wins}-{losses}',
        'record': f'{wins}-{losses}',
        'games_count': len(games),
        'avg_for': fmt1(avg_for),
        'avg_against': fmt1(avg_against),
        'game_options': [{'id': g.id, 'label': game_label(g)} for g in games],
        'totals': {'headers': TOTALS_HEADERS, 'rows': totals_rows(season, totals)},
        'game_log': {'headers': GAME_LOG_HEADERS, 'rows': game_log_rows(games)},
        'leaderboard': leaderboard_display(totals, metric),
        'game_meta': game_label(game) if game else None,
        'box_score': (
            {'headers': BOX_SCORE_HEADERS, 'rows': box_score_rows(season.players, game)}
            if game
            else None
        ),
    }


def games_page(season: Season, game_id: Optional[int] = None) -> dict[str, Any]:
    """Games page: clickable game list plus the selected game's box score."""
    selected = resolve_game(season, game_id)
    selected_id = selected.id if selected else game_id

    game_list = [
        {
            'cells': [g.id, game_label(g), g.diff],
            'href': game_href(g.id),
            'selected': g.id == selected_id,
        }
        for g in season.games
    ]

    detail = None
    if selected is not None:
        shooting = team_shooting(selected, season.players)
        detail = {
            'title': f'Box Score • Game {selected.id}',
            'meta': f'{game_label(selected)} • {selected.date.isoformat()}',
            'score': f'{selected.team_score}-{selected.opponent_score} ({game_result(selected)})',
            'diff': str(selected.diff),
            'fg': f'{shooting.fgm}-{shooting.fga} ({fmt_pct(shooting.fgp)})',
            'three_pt': f'{shooting.tpm}-{shooting.tpa} ({fmt_pct(shooting.tpp)})',
            'box_score': {
                'headers': BOX_SCORE_HEADERS,
                'rows': box_score_rows(season.players, selected),
                'links': {p: player_href(p) for p in season.players},
            },
        }

    return {
        'selected_id': selected_id,
        'game_list': {'headers': GAME_LIST_HEADERS, 'rows': game_list},
        'detail': detail,
    }


def player_page(season: Season, name: str) -> dict[str, Any]:
    """
    Player page: one row per game played plus season totals.

    Raises:
        LookupError: If ``name`` is not a season player
    """
    if name not in season.players:
        raise LookupError(f'Player not found: {name}')

    t = aggregate([name], season.games)[name]
    rows = []
    for g in season.games:
        line = g.stat_line(name)
        if line is None:
            continue
        rows.append({
            'href': game_href(g.id),
            'cells': [
                f'Game {g.id}',
                g.date.isoformat(),
                f'{g.team_score}-{g.opponent_score}',
                line.pts,
                line.ast,
                line.reb,
                f'{line.fgm}-{line.fga}',
                fmt_pct(line.fgp),
                f'{line.tpm}-{line.tpa}',
                fmt_pct(line.tpp),
            ],
        })

    return {
        'title': name,
        'subtitle': f'{len(season.games)} games tracked',
        'summary': (
            f'Totals: {t.pts} PTS • {t.ast} AST • {t.reb} REB • '
            f'FG% {fmt_pct(t.fgp)} • 3P% {fmt_pct(t.tpp)}'
        ),
        'games_played': t.g,
        'ppg': fmt1(t.per_game('pts')),
        'apg': fmt1(t.per_game('ast')),
        'rpg': fmt1(t.per_game('reb')),
        'games': {'headers': PLAYER_GAMES_HEADERS, 'rows': rows},
    }


def totals_frame(season: Season) -> pl.DataFrame:
    """Season totals as a DataFrame; undefined percentages are null."""
    totals = aggregate(season.players, season.games)
    records = []
    for player in season.players:
        t = totals[player]
        records.append({
            'player': player,
            'g': t.g,
            'pts': t.pts,
            'reb': t.reb,
            'ast': t.ast,
            'stl': t.stl,
            'blk': t.blk,
            'fgm': t.fgm,
            'fga': t.fga,
            'tpm': t.tpm,
            'tpa': t.tpa,
            'fgp': t.fgp if t.fga else None,
            'tpp': t.tpp if t.tpa else None,
        })

    schema = {
        'player': pl.Utf8, 'g': pl.Int64, 'pts': pl.Int64, 'reb': pl.Int64, 'ast': pl.Int64,
        'stl': pl.Int64, 'blk': pl.Int64, 'fgm': pl.Int64, 'fga': pl.Int64, 'tpm': pl.Int64,
        'tpa': pl.Int64, 'fgp': pl.Float64, 'tpp': pl.Float64,
    }
    frame = pl.DataFrame(records, schema=schema)
    return frame.with_columns(
        (pl.col('pts') / pl.when(pl.col('g') > 0).then(pl.col('g')).otherwise(1)).alias('ppg'),
    )


def game_log_frame(season: Season) -> pl.DataFrame:
    """One row per game with score, differential and result."""
    return pl.DataFrame(
        {
            'id': [g.id for g in season.games],
            'date': [g.date for g in season.games],
            'for': [g.team_score for g in season.games],
            'against': [g.opponent_score for g in season.games],
        },
        schema={'id': pl.Int64, 'date': pl.Date, 'for': pl.Int64, 'against': pl.Int64},
    ).with_columns(
        (pl.col('for') - pl.col('against')).alias('diff'),
        pl.when(pl.col('for') > pl.col('against'))
        .then(pl.lit('W'))
        .when(pl.col('for') < pl.col('against'))
        .then(pl.lit('L'))
        .otherwise(pl.lit('T'))
        .alias('result'),
    )
