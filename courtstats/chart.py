"""Trend chart geometry.

Pure functions: series in, pixel-space Scene out. Nothing here draws; a
Scene is painted by ``courtstats.surfaces.paint`` onto any Surface.

Layout rules:
    - X domain is [1, max(game count, largest x)] so the axis always spans
      the whole season.
    - Y domain is [min, max] of the visible values, padded by 10% of the range
      on each side, or by 1 when the range is zero.
    - Zero-width domains are treated as width 1 by the transform.
    - 6 y ticks spanning the padded domain; up to 10 integer x ticks.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .aggregator import check_metric
from .constants import (
    CHART_ASPECT,
    CHART_PADDING,
    GRID_COLOR,
    HUE_RANGE,
    LEGEND_CHAR_WIDTH,
    LEGEND_FONT_SIZE,
    LEGEND_LABEL_COLOR,
    LEGEND_LABEL_GAP,
    LEGEND_LINE_STEP,
    LEGEND_RIGHT_MARGIN,
    LEGEND_SWATCH,
    LEGEND_TOP,
    MARKER_RADIUS,
    MAX_X_TICKS,
    MESSAGE_COLOR,
    MIN_CANVAS_HEIGHT,
    MIN_CANVAS_WIDTH,
    MIN_MESSAGE_FONT_SIZE,
    NO_DATA_MESSAGE,
    NO_SELECTION_MESSAGE,
    RATIO_METRICS,
    SERIES_LINE_WIDTH,
    TICK_FONT_SIZE,
    TICK_LABEL_COLOR,
    Y_PAD_FLAT,
    Y_PAD_FRACTION,
    Y_TICK_INTERVALS,
)
from .models import SeriesPoint, TrendData
from .series import visible_points

logger = logging.getLogger('courtstats.chart')

Point = Tuple[float, float]


@dataclass(frozen=True)
class CanvasSize:
    """Displayed (CSS) size and backing-store (device pixel) size of a chart."""
    css_width: int
    css_height: int
    width: int
    height: int


@dataclass(frozen=True)
class PlotBounds:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class TextItem:
    x: float
    y: float
    text: str
    color: str
    size: int


@dataclass(frozen=True)
class LineItem:
    start: Point
    end: Point
    color: str
    width: float = 1


@dataclass(frozen=True)
class Tick:
    value: float
    pixel: float
    label: str


@dataclass(frozen=True)
class SeriesPath:
    """Polyline and markers for one player."""
    player: str
    color: str
    points: List[Point]
    source: List[SeriesPoint]
    line_width: float = SERIES_LINE_WIDTH
    marker_radius: float = MARKER_RADIUS


@dataclass(frozen=True)
class LegendEntry:
    player: str
    color: str
    swatch: Tuple[float, float, float, float]  # x, y, width, height
    label: TextItem


@dataclass
class Scene:
    """Everything needed to paint one chart frame."""
    width: int
    height: int
    message: Optional[TextItem] = None
    bounds: Optional[PlotBounds] = None
    x_domain: Optional[Tuple[float, float]] = None
    y_domain: Optional[Tuple[float, float]] = None
    x_ticks: List[Tick] = field(default_factory=list)
    y_ticks: List[Tick] = field(default_factory=list)
    grid: List[LineItem] = field(default_factory=list)
    labels: List[TextItem] = field(default_factory=list)
    series: List[SeriesPath] = field(default_factory=list)
    legend: List[LegendEntry] = field(default_factory=list)

    @property
    def is_placeholder(self) -> bool:
        return self.message is not None


class LinearScale:
    """Affine map from a data domain onto a pixel range.

    The pixel range may run backwards (e.g. bottom -> top for the y axis).
    """

    def __init__(self, domain_min: float, domain_max: float, pixel_start: float, pixel_end: float):
        self.domain_min = domain_min
        self.domain_max = domain_max
        self.pixel_start = pixel_start
        self.pixel_end = pixel_end
        self._span = (domain_max - domain_min) or 1

    def __call__(self, value: float) -> float:
        fraction = (value - self.domain_min) / self._span
        return self.pixel_start + fraction * (self.pixel_end - self.pixel_start)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


def canvas_size(
    container_width: float,
    device_pixel_ratio: float = 1.0,
    fallback_width: int = MIN_CANVAS_WIDTH,
) -> CanvasSize:
    """
    Size a chart canvas from its container's displayed width.

    Height follows the fixed 1200x420 aspect ratio; the backing store is
    scaled by the device pixel ratio with a floor of 300x200 device pixels.
    """
    dpr = device_pixel_ratio or 1
    css_w = container_width or fallback_width
    css_h = round_half_up(css_w * CHART_ASPECT)
    return CanvasSize(
        css_width=int(css_w),
        css_height=css_h,
        width=max(MIN_CANVAS_WIDTH, math.floor(css_w * dpr)),
        height=max(MIN_CANVAS_HEIGHT, math.floor(css_h * dpr)),
    )


def series_color(index: int, count: int) -> str:
    """CSS color for the series at ``index`` of ``count`` selected players."""
    hue = math.floor(index / max(1, count) * HUE_RANGE)
    return f'hsla({hue}, 85%, 65%, 0.95)'


def y_domain(values: Sequence[float]) -> Tuple[float, float]:
    """Padded [min, max] of ``values``; never zero-width."""
    y_min, y_max = min(values), max(values)
    pad = (y_max - y_min) * Y_PAD_FRACTION or Y_PAD_FLAT
    return y_min - pad, y_max + pad


def y_tick_values(y_min: float, y_max: float) -> List[float]:
    """Evenly spaced tick values from y_min to y_max inclusive."""
    return [y_min + (i / Y_TICK_INTERVALS) * (y_max - y_min) for i in range(Y_TICK_INTERVALS + 1)]


def x_tick_values(x_max: int) -> List[int]:
    """Up to MAX_X_TICKS integer game indices spanning [1, x_max]."""
    count = min(MAX_X_TICKS, x_max)
    step = (x_max - 1) / ((count - 1) or 1)
    return [round_half_up(1 + (i - 1) * step) for i in range(1, count + 1)]


def format_y_label(value: float, metric: str) -> str:
    suffix = '%' if metric in RATIO_METRICS else ''
    return f'{round_half_up(value)}{suffix}'


def _placeholder(width: int, height: int, text: str) -> Scene:
    size = max(MIN_MESSAGE_FONT_SIZE, round_half_up(width / 70))
    return Scene(
        width=width,
        height=height,
        message=TextItem(x=18, y=32, text=text, color=MESSAGE_COLOR, size=size),
    )


def layout_legend(players: Sequence[str], width: int) -> List[LegendEntry]:
    """
    Place one swatch + label per player, left to right.

    A new line starts once the running offset passes ``width`` minus the
    right margin.
    """
    entries = []
    lx: float = CHART_PADDING['l']
    ly: float = LEGEND_TOP

    for idx, player in enumerate(players):
        color = series_color(idx, len(players))
        entries.append(
            LegendEntry(
                player=player,
                color=color,
                swatch=(lx, ly - 10, LEGEND_SWATCH, LEGEND_SWATCH),
                label=TextItem(
                    x=lx + LEGEND_LABEL_GAP,
                    y=ly,
                    text=player,
                    color=LEGEND_LABEL_COLOR,
                    size=LEGEND_FONT_SIZE,
                ),
            )
        )

        lx += LEGEND_LABEL_GAP + len(player) * LEGEND_CHAR_WIDTH + LEGEND_LABEL_GAP
        if lx > width - LEGEND_RIGHT_MARGIN:
            lx = CHART_PADDING['l']
            ly += LEGEND_LINE_STEP

    return entries


def layout(
    selected_players: Sequence[str],
    metric: str,
    trend_data: TrendData,
    pixel_width: int,
    pixel_height: int,
) -> Scene:
    """
    Compute the chart scene for the selected players.

    Args:
        selected_players: Players to plot, in legend/color order
        metric: Metric the series were built for (drives % labels)
        trend_data: Output of ``build_series``
        pixel_width: Drawing surface width in device pixels
        pixel_height: Drawing surface height in device pixels

    Returns:
        Scene; a placeholder scene when nothing is selected or nothing is visible
    """
    check_metric(metric)
    W, H = pixel_width, pixel_height

    if not selected_players:
        return _placeholder(W, H, NO_SELECTION_MESSAGE)

    points = [
        pt
        for player in selected_players
        for pt in visible_points(trend_data.series.get(player, []))
    ]
    if not points:
        logger.debug(f'No visible {metric} points for {len(selected_players)} selected players')
        return _placeholder(W, H, NO_DATA_MESSAGE)

    pad = CHART_PADDING
    bounds = PlotBounds(left=pad['l'], top=pad['t'], right=W - pad['r'], bottom=H - pad['b'])

    x_min = 1
    x_max = max(trend_data.game_count, max(pt.x for pt in points))
    y_min, y_max = y_domain([pt.y for pt in points])

    x_to_px = LinearScale(x_min, x_max, bounds.left, bounds.right)
    y_to_px = LinearScale(y_min, y_max, bounds.bottom, bounds.top)

    scene = Scene(
        width=W,
        height=H,
        bounds=bounds,
        x_domain=(x_min, x_max),
        y_domain=(y_min, y_max),
    )

    # Horizontal grid + y labels
    for value in y_tick_values(y_min, y_max):
        py = y_to_px(value)
        label = format_y_label(value, metric)
        scene.y_ticks.append(Tick(value=value, pixel=py, label=label))
        scene.grid.append(LineItem(start=(bounds.left, py), end=(bounds.right, py), color=GRID_COLOR))
        scene.labels.append(TextItem(x=10, y=py + 4, text=label, color=TICK_LABEL_COLOR, size=TICK_FONT_SIZE))

    # Vertical grid + x labels
    for value in x_tick_values(x_max):
        px = x_to_px(value)
        label = f'G{value}'
        scene.x_ticks.append(Tick(value=value, pixel=px, label=label))
        scene.grid.append(LineItem(start=(px, bounds.top), end=(px, bounds.bottom), color=GRID_COLOR))
        scene.labels.append(TextItem(x=px - 10, y=H - 16, text=label, color=TICK_LABEL_COLOR, size=TICK_FONT_SIZE))

    for idx, player in enumerate(selected_players):
        visible = sorted(visible_points(trend_data.series.get(player, [])), key=lambda p: p.x)
        if not visible:
            continue
        scene.series.append(
            SeriesPath(
                player=player,
                color=series_color(idx, len(selected_players)),
                points=[(x_to_px(p.x), y_to_px(p.y)) for p in visible],
                source=visible,
            )
        )

    scene.legend = layout_legend(selected_players, W)
    return scene
