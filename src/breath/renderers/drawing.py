from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, TypeAlias

import pygame
import pygame.gfxdraw

Point: TypeAlias = tuple[float, float]
Color: TypeAlias = tuple[int, int, int, float]

ALPHA_MIN = 0.0
ALPHA_MAX = 255.0
MIN_DIAMETER = 0.5


def clamp_alpha(
    alpha: float, minimum: float = ALPHA_MIN, maximum: float = ALPHA_MAX
) -> float:
    return min(max(float(alpha), minimum), maximum)


def white(alpha: float) -> Color:
    return (255, 255, 255, clamp_alpha(alpha))


class DrawingSurface(Protocol):
    """Primitive operations a host canvas must support."""

    def clear(self, color: Color) -> None: ...

    def draw_polyline(
        self, points: Sequence[Point], color: Color, width: float, closed: bool
    ) -> None: ...

    def draw_circle(self, center: Point, diameter: float, color: Color) -> None: ...

    def draw_line(
        self, start: Point, end: Point, color: Color, width: float
    ) -> None: ...


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    color: Color
    width: float
    closed: bool = True

    def draw(self, surface: DrawingSurface) -> None:
        surface.draw_polyline(self.points, self.color, self.width, self.closed)


@dataclass(frozen=True)
class Circle:
    """Filled circle without an outline."""

    center: Point
    diameter: float
    color: Color

    def draw(self, surface: DrawingSurface) -> None:
        surface.draw_circle(self.center, self.diameter, self.color)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: Color
    width: float

    def draw(self, surface: DrawingSurface) -> None:
        surface.draw_line(self.start, self.end, self.color, self.width)


Primitive: TypeAlias = Polyline | Circle | Segment


def _to_pixel(point: Point) -> tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


def _rgba(color: Color, coverage: float = 1.0) -> tuple[int, int, int, int]:
    red, green, blue, alpha = color
    return (
        int(red),
        int(green),
        int(blue),
        int(round(clamp_alpha(alpha * min(coverage, 1.0)))),
    )


class PygameDrawingSurface:
    """Draw primitives onto a ``pygame.Surface`` with alpha blending.

    ``pygame.gfxdraw`` blends translucent colours into the target, which plain
    ``pygame.draw`` does not. Strokes are drawn one pixel wide with their alpha
    scaled by the requested width. Dots are drawn at the odd pixel width
    nearest their diameter with alpha scaled by the ratio of requested to drawn
    area, so a dot never lights more than its share of the screen.

    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def clear(self, color: Color) -> None:
        self.surface.fill(_rgba(color))

    def draw_polyline(
        self,
        points: Sequence[Point],
        color: Color,
        width: float,
        closed: bool = True,
    ) -> None:
        if len(points) < 2:
            return
        pixels = [_to_pixel(point) for point in points]
        rgba = _rgba(color, coverage=width)
        if closed and len(pixels) >= 3:
            pygame.gfxdraw.aapolygon(self.surface, pixels, rgba)
            return
        for start, end in zip(pixels, pixels[1:]):
            pygame.gfxdraw.line(self.surface, *start, *end, rgba)
        if closed:
            pygame.gfxdraw.line(self.surface, *pixels[-1], *pixels[0], rgba)

    def draw_circle(self, center: Point, diameter: float, color: Color) -> None:
        diameter = max(MIN_DIAMETER, diameter)
        x, y = _to_pixel(center)
        # filled_circle with radius r covers 2r + 1 pixels across.
        radius = max(0, int(round((diameter - 1.0) / 2.0)))
        rgba = _rgba(color, coverage=(diameter / (2 * radius + 1)) ** 2)
        if radius == 0:
            pygame.gfxdraw.pixel(self.surface, x, y, rgba)
            return
        pygame.gfxdraw.filled_circle(self.surface, x, y, radius, rgba)

    def draw_line(self, start: Point, end: Point, color: Color, width: float) -> None:
        self.draw_polyline((start, end), color, width, closed=False)
