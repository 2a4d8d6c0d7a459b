"""Data models for courtstats."""

import datetime
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional


def ratio(made: int, attempted: int) -> float:
    """Return made/attempted, or NaN when there were no attempts."""
    return made / attempted if attempted else math.nan


@dataclass(frozen=True)
class StatLine:
    """One player's recorded counting stats for one game."""
    pts: int = 0
    reb: int = 0
    ast: int = 0
    stl: int = 0
    blk: int = 0
    fgm: int = 0
    fga: int = 0
    tpm: int = 0
    tpa: int = 0

    @property
    def fgp(self) -> float:
        return ratio(self.fgm, self.fga)

    @property
    def tpp(self) -> float:
        return ratio(self.tpm, self.tpa)


@dataclass(frozen=True)
class Game:
    """A single game with final scores and the stat lines of tracked players."""
    id: int
    date: datetime.date
    team_score: int
    opponent_score: int
    players: Dict[str, StatLine] = field(default_factory=dict)

    @property
    def diff(self) -> int:
        return self.team_score - self.opponent_score

    def stat_line(self, player: str) -> Optional[StatLine]:
        """Stat line for ``player``, or None if they did not play."""
        return self.players.get(player)


@dataclass(frozen=True)
class Season:
    """Read-only store of the loaded season: player list and games sorted by id."""
    players: List[str]
    games: List[Game]

    def game(self, game_id: int) -> Optional[Game]:
        for g in self.games:
            if g.id == game_id:
                return g
        return None


@dataclass
class Totals:
    """Season-long sum of a player's stat lines plus games played."""
    g: int = 0
    pts: int = 0
    reb: int = 0
    ast: int = 0
    stl: int = 0
    blk: int = 0
    fgm: int = 0
    fga: int = 0
    tpm: int = 0
    tpa: int = 0

    @property
    def fgp(self) -> float:
        return ratio(self.fgm, self.fga)

    @property
    def tpp(self) -> float:
        return ratio(self.tpm, self.tpa)

    def per_game(self, stat: str) -> float:
        """Average of ``stat`` per game played (0 games counts as 1)."""
        return getattr(self, stat) / (self.g or 1)


@dataclass(frozen=True)
class SeriesPoint:
    """One (game index, value) point of a player's trend series."""
    x: int
    y: float  # NaN when the ratio is undefined for this game
    game_id: int


@dataclass
class TrendData:
    """Output of the series builder: points per player plus the season length."""
    series: Dict[str, List[SeriesPoint]]
    game_count: int
