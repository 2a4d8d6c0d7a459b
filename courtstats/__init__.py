from .models import Game, Season, SeriesPoint, StatLine, Totals, TrendData
from .aggregator import (
    aggregate,
    leaderboard_leader,
    rank_players,
    game_result,
    season_record,
    average_scores,
    team_shooting,
)
from .series import build_series
from .chart import Scene, canvas_size, layout
from .surfaces import PillowSurface, SvgSurface, paint
from .store import load_season, season_from_dict
from .views import overview, games_page, player_page, totals_frame, game_log_frame
from .excel_export import export_season_workbook

__all__ = [
    # Models
    'Game',
    'Season',
    'SeriesPoint',
    'StatLine',
    'Totals',
    'TrendData',
    # Aggregation
    'aggregate',
    'leaderboard_leader',
    'rank_players',
    'game_result',
    'season_record',
    'average_scores',
    'team_shooting',
    # Trends
    'build_series',
    'Scene',
    'canvas_size',
    'layout',
    'paint',
    'PillowSurface',
    'SvgSurface',
    # Loading
    'load_season',
    'season_from_dict',
    # Views and export
    'overview',
    'games_page',
    'player_page',
    'totals_frame',
    'game_log_frame',
    'export_season_workbook',
]
