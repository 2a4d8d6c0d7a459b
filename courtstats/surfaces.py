"""Drawing surfaces that paint a chart Scene.

``paint`` only uses the five primitives of the Surface protocol, so a new
backend needs nothing beyond those. Two backends are provided:

- SvgSurface: draws onto a matplotlib Figure whose axes span the whole
  canvas in pixel coordinates, exported with ``savefig(format='svg')``.
- PillowSurface: draws onto a Pillow RGBA image (PNG export).
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import Dict, Protocol, Sequence, Tuple

import matplotlib
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Rectangle
from PIL import Image, ImageColor, ImageDraw, ImageFont

from .chart import Point, Scene
from .constants import BACKGROUND_COLOR

logger = logging.getLogger('courtstats.surfaces')

RGBA = Tuple[int, int, int, int]

# rgba()/hsla() with a 0-1 alpha; ImageColor only knows integer alpha
_ALPHA_COLOR = re.compile(r'^(rgb|hsl)a\((.*),\s*([\d.]+)\s*\)$')

# 1 SVG user unit == 1 pt == 1 canvas pixel
SVG_DPI = 72
SVG_RC = {'svg.fonttype': 'none', 'svg.hashsalt': 'courtstats'}


class Surface(Protocol):  # pragma: no cover - structural only
    """Primitive drawing operations a Scene is painted with."""

    width: int
    height: int

    def clear(self) -> None:
        ...

    def line(self, points: Sequence[Point], color: str, width: float) -> None:
        ...

    def circle(self, center: Point, radius: float, color: str) -> None:
        ...

    def text(self, position: Point, text: str, color: str, size: int) -> None:
        ...

    def rect(self, box: Tuple[float, float, float, float], color: str) -> None:
        ...


def parse_color(color: str) -> RGBA:
    """
    Convert a CSS color string to an RGBA tuple.

    Anything ``PIL.ImageColor`` understands is accepted, plus ``rgba()`` and
    ``hsla()`` with a fractional alpha.

    Raises:
        ValueError: If the color string is not recognised
    """
    color = color.strip()
    alpha = 1.0
    match = _ALPHA_COLOR.match(color)
    if match:
        kind, body, alpha_text = match.groups()
        color = f'{kind}({body})'
        alpha = float(alpha_text)

    rgb = ImageColor.getrgb(color)
    if len(rgb) == 4 and not match:
        return rgb
    r, g, b = rgb[:3]
    return r, g, b, round(alpha * 255)


def _mpl_color(color: str) -> Tuple[float, float, float, float]:
    return tuple(c / 255 for c in parse_color(color))


def paint(scene: Scene, surface: Surface) -> None:
    """Paint ``scene`` onto ``surface``; the surface is cleared first."""
    surface.clear()

    if scene.message is not None:
        m = scene.message
        surface.text((m.x, m.y), m.text, m.color, m.size)
        return

    for grid_line in scene.grid:
        surface.line([grid_line.start, grid_line.end], grid_line.color, grid_line.width)

    for label in scene.labels:
        surface.text((label.x, label.y), label.text, label.color, label.size)

    for path in scene.series:
        if len(path.points) > 1:
            surface.line(path.points, path.color, path.line_width)
        for center in path.points:
            surface.circle(center, path.marker_radius, path.color)

    for entry in scene.legend:
        surface.rect(entry.swatch, entry.color)
        lbl = entry.label
        surface.text((lbl.x, lbl.y), lbl.text, lbl.color, lbl.size)


class SvgSurface:
    """Draws onto a matplotlib Figure sized so one data unit is one pixel."""

    def __init__(self, width: int, height: int, background: str | None = BACKGROUND_COLOR):
        self.width = width
        self.height = height
        self.background = background
        self.figure = Figure(figsize=(width / SVG_DPI, height / SVG_DPI), dpi=SVG_DPI)
        self.axes = None
        self.clear()

    def clear(self) -> None:
        self.figure.clear()
        if self.background:
            self.figure.patch.set_facecolor(_mpl_color(self.background))
        else:
            self.figure.patch.set_facecolor('none')

        ax = self.figure.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_axis_off()
        self.axes = ax

    def line(self, points: Sequence[Point], color: str, width: float) -> None:
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        self.axes.add_line(
            Line2D(xs, ys, color=_mpl_color(color), linewidth=width, solid_joinstyle='round')
        )

    def circle(self, center: Point, radius: float, color: str) -> None:
        self.axes.add_patch(Circle(center, radius, facecolor=_mpl_color(color), edgecolor='none'))

    def text(self, position: Point, text: str, color: str, size: int) -> None:
        x, y = position
        self.axes.text(
            x,
            y,
            text,
            color=_mpl_color(color),
            fontsize=size,
            fontfamily='sans-serif',
            ha='left',
            va='baseline',
            parse_math=False,
        )

    def rect(self, box: Tuple[float, float, float, float], color: str) -> None:
        x, y, w, h = box
        self.axes.add_patch(Rectangle((x, y), w, h, facecolor=_mpl_color(color), edgecolor='none'))

    def to_svg(self) -> str:
        buffer = io.StringIO()
        with matplotlib.rc_context(SVG_RC):
            self.figure.savefig(
                buffer,
                format='svg',
                facecolor=self.figure.get_facecolor(),
                metadata={'Date': None},
            )
        return buffer.getvalue()

    def save(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_svg(), encoding='utf-8')
        logger.info(f'Chart saved to {path}')


class PillowSurface:
    """Draws onto a Pillow RGBA image."""

    def __init__(self, width: int, height: int, background: str = BACKGROUND_COLOR):
        self.width = width
        self.height = height
        self.background = parse_color(background)
        self.image = Image.new('RGBA', (width, height), self.background)
        self._draw = ImageDraw.Draw(self.image, 'RGBA')
        self._fonts: Dict[int, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}

    def _font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = ImageFont.load_default(size=size)
        return self._fonts[size]

    def clear(self) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=self.background)

    def line(self, points: Sequence[Point], color: str, width: float) -> None:
        self._draw.line(list(points), fill=parse_color(color), width=max(1, round(width)), joint='curve')

    def circle(self, center: Point, radius: float, color: str) -> None:
        x, y = center
        self._draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=parse_color(color))

    def text(self, position: Point, text: str, color: str, size: int) -> None:
        # position is the text baseline, as on an HTML canvas
        x, y = position
        self._draw.text((x, y - size), text, fill=parse_color(color), font=self._font(size))

    def rect(self, box: Tuple[float, float, float, float], color: str) -> None:
        x, y, w, h = box
        self._draw.rectangle((x, y, x + w, y + h), fill=parse_color(color))

    def save(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        logger.info(f'Chart saved to {path}')
