"""Constants and mappings for courtstats."""

# Counting stats summed into season totals (order matches the totals table)
COUNTING_FIELDS = ('pts', 'reb', 'ast', 'stl', 'blk', 'fgm', 'fga', 'tpm', 'tpa')

# Ratio metrics: metric -> (makes field, attempts field)
RATIO_METRICS = {
    'fgp': ('fgm', 'fga'),
    'tpp': ('tpm', 'tpa'),
}

# Metrics selectable for the leaderboard and the trend chart
METRICS = ('pts', 'reb', 'ast', 'stl', 'blk', 'fgp', 'tpp')

METRIC_LABELS = {
    'pts': 'Points',
    'reb': 'Rebounds',
    'ast': 'Assists',
    'stl': 'Steals',
    'blk': 'Blocks',
    'fgp': 'FG%',
    'tpp': '3P%',
}

# Placeholder for values that cannot be shown (did not play, zero attempts)
MISSING = '—'

# Chart geometry (pixels)
CHART_PADDING = {'l': 54, 'r': 16, 't': 16, 'b': 40}
CHART_ASPECT = 420 / 1200
MIN_CANVAS_WIDTH = 300
MIN_CANVAS_HEIGHT = 200

Y_TICK_INTERVALS = 5  # 6 tick values
MAX_X_TICKS = 10
Y_PAD_FRACTION = 0.1
Y_PAD_FLAT = 1

HUE_RANGE = 300
SERIES_LINE_WIDTH = 2
MARKER_RADIUS = 3

LEGEND_TOP = 18
LEGEND_LINE_STEP = 18
LEGEND_SWATCH = 12
LEGEND_LABEL_GAP = 18
LEGEND_CHAR_WIDTH = 8
LEGEND_RIGHT_MARGIN = 180

TICK_FONT_SIZE = 12
LEGEND_FONT_SIZE = 13
MIN_MESSAGE_FONT_SIZE = 14

# Colors (CSS syntax, converted by surfaces that need tuples)
GRID_COLOR = 'rgba(255,255,255,0.08)'
TICK_LABEL_COLOR = 'rgba(255,255,255,0.65)'
LEGEND_LABEL_COLOR = 'rgba(255,255,255,0.85)'
MESSAGE_COLOR = 'rgba(255,255,255,0.75)'
BACKGROUND_COLOR = 'rgba(15,23,42,1)'

NO_SELECTION_MESSAGE = 'Select one or more players to view trends.'
NO_DATA_MESSAGE = 'No data for selected players/metric.'

# Table headers used by the views and the Excel export
TOTALS_HEADERS = [
    'Player', 'G', 'PTS', 'PPG', 'REB', 'RPG', 'AST', 'APG',
    'STL', 'SPG', 'BLK', 'BPG', 'FG%', '3P%',
]
GAME_LOG_HEADERS = ['Game #', 'Date', 'Score', 'Diff', 'W/L']
BOX_SCORE_HEADERS = ['Player', 'PTS', 'REB', 'AST', 'STL', 'BLK', 'FG', 'FG%', '3PT', '3P%']
GAME_LIST_HEADERS = ['#', 'Game', 'Diff']
PLAYER_GAMES_HEADERS = ['Game', 'Date', 'Score', 'PTS', 'AST', 'REB', 'FG', 'FG%', '3PT', '3P%']
