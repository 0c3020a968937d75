"""Frame geometry for the breathing rings.

Everything here is a pure function of the frame counter, the canvas size and
the injected noise field. Nothing touches a drawing surface: ``compose_frame``
returns the ordered primitives for one frame, already mapped to canvas
coordinates through an explicit :class:`AffineTransform`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from breath.renderers.breathing_rings.state import RING_SPECS, RingSpec
from breath.renderers.drawing import (MIN_DIAMETER, Circle, Color,
                                      DrawingSurface, Point, Polyline,
                                      Primitive, Segment, white)
from breath.utilities.noise import NoiseFn

TWO_PI = 2.0 * math.pi
BACKGROUND: Color = (0, 0, 0, 255.0)

# Master breath: one slow sine plus a smooth noise wobble.
BREATH_RATE = 0.007
BREATH_AMPLITUDE = 0.10
BREATH_NOISE_RATE = 0.0015
BREATH_NOISE_AMPLITUDE = 0.08

ROTATION_RATE = 0.00013

# Per-ring ripple travelling outwards.
RING_PHASE_STEP = 0.22
RING_WAVE_AMPLITUDE = 0.045
RING_NOISE_SPACING = 9.1
RING_NOISE_RATE = 0.0020
RING_NOISE_AMPLITUDE = 0.05

# Per-point jitter. Each channel samples the field at its own seed offset.
SEED_STRIDE = 300
RADIAL_JITTER_RATE = 0.0030
RADIAL_JITTER_AMPLITUDE = 4.5
ANGULAR_SEED_OFFSET = 777
ANGULAR_JITTER_RATE = 0.0025
ANGULAR_JITTER_AMPLITUDE = 0.022
ALPHA_SEED_OFFSET = 500
ALPHA_JITTER_RATE = 0.0040
ALPHA_JITTER_AMPLITUDE = 55.0
SIZE_SEED_OFFSET = 1500
SIZE_JITTER_RATE = 0.0050
SIZE_JITTER_AMPLITUDE = 1.5

# (innermost, outermost)
RING_LINE_ALPHA = (28.0, 7.0)
DOT_ALPHA = (210.0, 55.0)
DOT_DIAMETER = (4.8, 1.4)
RING_LINE_WIDTH = 0.5
DOT_ALPHA_MIN = 8.0
DOT_ALPHA_MAX = 255.0

SPOKE_COUNT = 6
SPOKE_ALPHA = 8.0
SPOKE_WIDTH = 0.4

GLOW_LAYERS = 5
GLOW_ALPHA_STEP = 5.0
GLOW_BASE_FRACTION = 0.016
GLOW_BREATH_FRACTION = 0.004

CENTER_DOT_DIAMETER = 3.5
CENTER_DOT_PULSE = 0.9
CENTER_DOT_PULSE_RATE = 1.6
CENTER_DOT_ALPHA = 200.0
CENTER_DOT_ALPHA_SWING = 35.0
CENTER_DOT_ALPHA_RATE = 1.1


def _sample(noise: NoiseFn, x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Evaluate ``noise`` and broadcast the result to the input shape."""
    shape = np.broadcast(np.asarray(x), np.asarray(y)).shape
    return np.broadcast_to(np.asarray(noise(x, y), dtype=np.float64), shape)


def _centered(noise: NoiseFn, x: ArrayLike, y: ArrayLike) -> np.ndarray:
    return _sample(noise, x, y) - 0.5


def lerp_ring(ring_index: int, ring_count: int, start: float, end: float) -> float:
    """Map ``ring_index`` over [0, ring_count - 1] onto [start, end]."""
    if ring_count <= 1:
        return start
    return start + (end - start) * ring_index / (ring_count - 1)


def min_dimension(width: int, height: int) -> int:
    return min(width, height)


def breath_phase(t: int) -> float:
    return t * BREATH_RATE


def master_breath(t: int, noise: NoiseFn) -> float:
    wobble = float(_centered(noise, t * BREATH_NOISE_RATE, 0.0))
    return (
        math.sin(breath_phase(t)) * BREATH_AMPLITUDE
        + wobble * BREATH_NOISE_AMPLITUDE
    )


def breath_factor(t: int, noise: NoiseFn) -> float:
    return 1.0 + master_breath(t, noise)


def rotation_angle(t: int) -> float:
    """Slow drift of the whole figure, wrapped into [0, 2*pi)."""
    return (t * ROTATION_RATE) % TWO_PI


def ring_local_modulation(ring_index: int, t: int, noise: NoiseFn) -> float:
    ring_noise = float(
        _centered(noise, ring_index * RING_NOISE_SPACING, t * RING_NOISE_RATE)
    )
    return (
        math.sin(breath_phase(t) + ring_index * RING_PHASE_STEP)
        * RING_WAVE_AMPLITUDE
        + ring_noise * RING_NOISE_AMPLITUDE
    )


def _ring_radius(
    spec: RingSpec,
    ring_index: int,
    t: int,
    min_dim: float,
    factor: float,
    noise: NoiseFn,
) -> float:
    local = ring_local_modulation(ring_index, t, noise)
    return spec.base_radius_fraction * min_dim * factor * (1.0 + local)


def ring_radius(
    ring_index: int,
    t: int,
    width: int,
    height: int,
    noise: NoiseFn,
    rings: Sequence[RingSpec] = RING_SPECS,
) -> float:
    return _ring_radius(
        rings[ring_index],
        ring_index,
        t,
        min_dimension(width, height),
        breath_factor(t, noise),
        noise,
    )


def point_seeds(ring_index: int, point_count: int) -> np.ndarray:
    return ring_index * SEED_STRIDE + np.arange(point_count, dtype=np.float64)


def ring_points(
    ring_index: int,
    point_count: int,
    radius: float,
    t: int,
    noise: NoiseFn,
) -> np.ndarray:
    """Return ``(point_count, 2)`` jittered positions around the local origin."""
    seeds = point_seeds(ring_index, point_count)
    angles = TWO_PI * np.arange(point_count, dtype=np.float64) / point_count
    radial = _centered(noise, seeds, t * RADIAL_JITTER_RATE) * RADIAL_JITTER_AMPLITUDE
    angular = (
        _centered(noise, seeds + ANGULAR_SEED_OFFSET, t * ANGULAR_JITTER_RATE)
        * ANGULAR_JITTER_AMPLITUDE
    )
    r = radius + radial
    a = angles + angular
    return np.column_stack((np.cos(a) * r, np.sin(a) * r))


def dot_alphas(
    ring_index: int,
    point_count: int,
    t: int,
    noise: NoiseFn,
    ring_count: int = len(RING_SPECS),
) -> np.ndarray:
    base = lerp_ring(ring_index, ring_count, *DOT_ALPHA)
    seeds = point_seeds(ring_index, point_count)
    offset = (
        _centered(noise, seeds + ALPHA_SEED_OFFSET, t * ALPHA_JITTER_RATE)
        * ALPHA_JITTER_AMPLITUDE
    )
    return np.clip(base + offset, DOT_ALPHA_MIN, DOT_ALPHA_MAX)


def dot_diameters(
    ring_index: int,
    point_count: int,
    t: int,
    noise: NoiseFn,
    ring_count: int = len(RING_SPECS),
) -> np.ndarray:
    base = lerp_ring(ring_index, ring_count, *DOT_DIAMETER)
    seeds = point_seeds(ring_index, point_count)
    offset = (
        _centered(noise, seeds + SIZE_SEED_OFFSET, t * SIZE_JITTER_RATE)
        * SIZE_JITTER_AMPLITUDE
    )
    return np.maximum(MIN_DIAMETER, base + offset)


def glow_radius(master: float, min_dim: float) -> float:
    return (GLOW_BASE_FRACTION + master * GLOW_BREATH_FRACTION) * min_dim


@dataclass(frozen=True)
class AffineTransform:
    """Rotation about the local origin followed by a translation."""

    offset_x: float
    offset_y: float
    angle: float

    @classmethod
    def for_canvas(cls, width: int, height: int, angle: float) -> AffineTransform:
        return cls(offset_x=width / 2.0, offset_y=height / 2.0, angle=angle)

    def apply(self, points: ArrayLike) -> np.ndarray:
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        x = pts[:, 0] * cos_a - pts[:, 1] * sin_a + self.offset_x
        y = pts[:, 0] * sin_a + pts[:, 1] * cos_a + self.offset_y
        return np.column_stack((x, y))

    def apply_point(self, point: Point) -> Point:
        x, y = self.apply(point)[0]
        return float(x), float(y)


@dataclass(frozen=True)
class FrameGeometry:
    t: int
    width: int
    height: int
    min_dim: int
    breath_phase: float
    master_breath: float
    breath_factor: float
    rotation: float
    ring_radii: tuple[float, ...]
    primitives: tuple[Primitive, ...]
    background: Color = BACKGROUND

    def draw(self, surface: DrawingSurface) -> None:
        surface.clear(self.background)
        for primitive in self.primitives:
            primitive.draw(surface)


def _as_points(array: np.ndarray) -> tuple[Point, ...]:
    return tuple((float(x), float(y)) for x, y in array)


def _ring_primitives(
    ring_index: int,
    spec: RingSpec,
    radius: float,
    t: int,
    noise: NoiseFn,
    transform: AffineTransform,
    ring_count: int,
) -> list[Primitive]:
    local = ring_points(ring_index, spec.point_count, radius, t, noise)
    points = _as_points(transform.apply(local))

    primitives: list[Primitive] = [
        Polyline(
            points=points,
            color=white(lerp_ring(ring_index, ring_count, *RING_LINE_ALPHA)),
            width=RING_LINE_WIDTH,
            closed=True,
        )
    ]
    alphas = dot_alphas(ring_index, spec.point_count, t, noise, ring_count)
    diameters = dot_diameters(ring_index, spec.point_count, t, noise, ring_count)
    for point, alpha, diameter in zip(points, alphas, diameters):
        primitives.append(
            Circle(
                center=point,
                diameter=float(diameter),
                color=white(float(alpha)),
            )
        )
    return primitives


def _spoke_primitives(
    outer_radius: float, transform: AffineTransform
) -> list[Primitive]:
    origin = transform.apply_point((0.0, 0.0))
    spokes: list[Primitive] = []
    for i in range(SPOKE_COUNT):
        angle = TWO_PI * i / SPOKE_COUNT
        tip = transform.apply_point(
            (math.cos(angle) * outer_radius, math.sin(angle) * outer_radius)
        )
        spokes.append(
            Segment(start=origin, end=tip, color=white(SPOKE_ALPHA), width=SPOKE_WIDTH)
        )
    return spokes


def _center_primitives(
    phase: float, master: float, min_dim: float, transform: AffineTransform
) -> list[Primitive]:
    center = transform.apply_point((0.0, 0.0))
    glow = glow_radius(master, min_dim)
    primitives: list[Primitive] = []
    for layer in range(GLOW_LAYERS, 0, -1):
        primitives.append(
            Circle(
                center=center,
                diameter=max(MIN_DIAMETER, glow * 2.0 * (layer / GLOW_LAYERS)),
                color=white(layer * GLOW_ALPHA_STEP),
            )
        )

    pulse = CENTER_DOT_DIAMETER + math.sin(phase * CENTER_DOT_PULSE_RATE) * CENTER_DOT_PULSE
    alpha = (
        CENTER_DOT_ALPHA
        + math.sin(phase * CENTER_DOT_ALPHA_RATE) * CENTER_DOT_ALPHA_SWING
    )
    primitives.append(
        Circle(center=center, diameter=max(MIN_DIAMETER, pulse), color=white(alpha))
    )
    return primitives


def compose_frame(
    t: int,
    width: int,
    height: int,
    noise: NoiseFn,
    rings: Sequence[RingSpec] = RING_SPECS,
) -> FrameGeometry:
    """Build the primitives for frame ``t`` on a ``width`` x ``height`` canvas."""
    min_dim = min_dimension(width, height)
    phase = breath_phase(t)
    master = master_breath(t, noise)
    factor = 1.0 + master
    rotation = rotation_angle(t)
    transform = AffineTransform.for_canvas(width, height, rotation)
    ring_count = len(rings)

    primitives: list[Primitive] = []
    radii: list[float] = []
    for ring_index, spec in enumerate(rings):
        radius = _ring_radius(spec, ring_index, t, min_dim, factor, noise)
        radii.append(radius)
        primitives.extend(
            _ring_primitives(
                ring_index, spec, radius, t, noise, transform, ring_count
            )
        )

    outer_radius = rings[-1].base_radius_fraction * min_dim * factor
    primitives.extend(_spoke_primitives(outer_radius, transform))
    primitives.extend(_center_primitives(phase, master, min_dim, transform))

    return FrameGeometry(
        t=t,
        width=width,
        height=height,
        min_dim=min_dim,
        breath_phase=phase,
        master_breath=master,
        breath_factor=factor,
        rotation=rotation,
        ring_radii=tuple(radii),
        primitives=tuple(primitives),
    )
