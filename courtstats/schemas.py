"""Pydantic schemas for JSON data validation."""

import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import METRICS


class StatLineSchema(BaseModel):
    """One player's box-score line in a game."""

    pts: int = Field(0, ge=0)
    reb: int = Field(0, ge=0)
    ast: int = Field(0, ge=0)
    stl: int = Field(0, ge=0)
    blk: int = Field(0, ge=0)
    fgm: int = Field(0, ge=0)
    fga: int = Field(0, ge=0)
    tpm: int = Field(0, ge=0)
    tpa: int = Field(0, ge=0)

    @model_validator(mode='after')
    def check_makes_within_attempts(self):
        """Ensure makes never exceed attempts."""
        if self.fgm > self.fga:
            raise ValueError(f'fgm ({self.fgm}) exceeds fga ({self.fga})')
        if self.tpm > self.tpa:
            raise ValueError(f'tpm ({self.tpm}) exceeds tpa ({self.tpa})')
        return self

    class Config:
        extra = 'ignore'


class GameSchema(BaseModel):
    """A game entry in the season file."""

    id: int
    date: datetime.date
    team_score: int = Field(..., ge=0, alias='for')
    opponent_score: int = Field(..., ge=0, alias='against')
    players: dict[str, StatLineSchema] = Field(default_factory=dict)

    class Config:
        extra = 'forbid'
        populate_by_name = True


class SeasonFile(BaseModel):
    """Complete season (games.json) file structure."""

    players: list[str]
    games: list[GameSchema] = Field(default_factory=list)

    @field_validator('players')
    @classmethod
    def validate_players(cls, v):
        """Ensure player names are non-empty and unique."""
        seen = set()
        for name in v:
            if not name or not name.strip():
                raise ValueError('Player names must be non-empty')
            if name in seen:
                raise ValueError(f'Duplicate player: {name}')
            seen.add(name)
        return v

    class Config:
        extra = 'forbid'


class DashboardConfig(BaseModel):
    """Dashboard configuration settings."""

    season_file: str = 'data/games.json'
    default_metric: str = 'pts'
    container_width: int = Field(1200, ge=1)
    device_pixel_ratio: float = Field(1.0, gt=0)
    output_dir: str = 'output'

    @field_validator('default_metric')
    @classmethod
    def validate_metric(cls, v):
        """Ensure the default metric is supported."""
        if v not in METRICS:
            raise ValueError(f'Invalid metric: {v}')
        return v

    class Config:
        extra = 'forbid'
