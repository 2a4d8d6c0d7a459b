#!/usr/bin/env python3
"""
courtstats CLI

Loads a season file (games.json), prints the season summary and the
leaderboard for a metric, and renders the multi-player trend chart.

Usage:
    python render_trends.py --data data/games.json --metric pts
    python render_trends.py --metric fgp --players "Alex,Blake" --output output/fgp.png
    python render_trends.py --excel output/season.xlsx --summary output/overview.json
    python render_trends.py --check
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from courtstats import (
    aggregate,
    build_series,
    canvas_size,
    export_season_workbook,
    layout,
    load_season,
    overview,
    paint,
    rank_players,
)
from courtstats.config import (
    get_container_width,
    get_default_metric,
    get_device_pixel_ratio,
    get_output_dir,
    get_season_file,
)
from courtstats.constants import METRIC_LABELS, METRICS, RATIO_METRICS
from courtstats.logging_config import setup_logging
from courtstats.schemas import SeasonFile
from courtstats.surfaces import PillowSurface, SvgSurface
from courtstats.utils import save_json, validate_json_file
from courtstats.views import fmt_pct


def parse_players(value: str | None, season_players: list[str]) -> list[str]:
    """Comma-separated player names, in the order given; all players if omitted."""
    if not value:
        return list(season_players)
    selected = [p.strip() for p in value.split(',') if p.strip()]
    unknown = [p for p in selected if p not in season_players]
    if unknown:
        raise ValueError(f'Unknown players: {", ".join(unknown)}')
    return selected


def render_chart(season, selected: list[str], metric: str, output: Path, width: int, dpr: float) -> None:
    """Lay out the trend chart and paint it to SVG or PNG based on the suffix."""
    size = canvas_size(width, dpr)
    trend_data = build_series(season.players, season.games, metric)
    scene = layout(selected, metric, trend_data, size.width, size.height)

    if output.suffix.lower() == '.png':
        surface = PillowSurface(size.width, size.height)
    else:
        surface = SvgSurface(size.width, size.height)

    paint(scene, surface)
    surface.save(output)
    print(f'Chart saved to {output} ({size.width}x{size.height})')


def print_leaderboard(season, metric: str) -> None:
    totals = aggregate(season.players, season.games)
    print(f'\n{METRIC_LABELS[metric]} leaders')
    print('-' * 30)
    for rank, (player, value) in enumerate(rank_players(totals, metric), start=1):
        shown = fmt_pct(value) if metric in RATIO_METRICS else str(value)
        print(f'  {rank:>2}. {player:<20} {shown:>7}')


def main():
    parser = argparse.ArgumentParser(description="Season stats and trend chart renderer")
    parser.add_argument(
        "--data", "-d",
        default=None,
        help="Path to the season JSON file (defaults to the configured season file)",
    )
    parser.add_argument(
        "--metric", "-m",
        choices=METRICS,
        default=None,
        help="Metric for the leaderboard and trend chart",
    )
    parser.add_argument(
        "--players", "-p",
        default=None,
        help="Comma-separated players to chart (default: all)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Chart output path (.svg or .png)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Displayed chart width in CSS pixels",
    )
    parser.add_argument(
        "--dpr",
        type=float,
        default=None,
        help="Device pixel ratio",
    )
    parser.add_argument(
        "--excel",
        default=None,
        help="Also export totals and game log to this .xlsx file",
    )
    parser.add_argument(
        "--summary",
        default=None,
        help="Also write the overview page model to this JSON file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only validate the season file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    data_path = Path(args.data) if args.data else get_season_file()
    metric = args.metric or get_default_metric()

    if args.check:
        is_valid, error = validate_json_file(data_path, SeasonFile)
        if not is_valid:
            print(error, file=sys.stderr)
            sys.exit(1)
        print(f'{data_path} is valid')
        return

    try:
        season = load_season(data_path)
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        print(f'Failed to load {data_path}: {e}', file=sys.stderr)
        sys.exit(1)

    summary = overview(season, metric)
    print(summary['subtitle'])
    print(f"Avg score: {summary['avg_for']} - {summary['avg_against']}")
    print_leaderboard(season, metric)

    try:
        selected = parse_players(args.players, season.players)
    except ValueError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    output = Path(args.output) if args.output else get_output_dir() / f'trends_{metric}.svg'
    render_chart(
        season,
        selected,
        metric,
        output,
        width=args.width or get_container_width(),
        dpr=args.dpr or get_device_pixel_ratio(),
    )

    if args.excel:
        export_season_workbook(season, args.excel)
        print(f'Workbook saved to {args.excel}')

    if args.summary:
        save_json(args.summary, summary)
        print(f'Overview saved to {args.summary}')


if __name__ == "__main__":
    main()
