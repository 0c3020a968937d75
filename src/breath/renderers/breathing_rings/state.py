from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RingSpec:
    """One concentric formation: how many points and how far out."""

    point_count: int
    base_radius_fraction: float

    def __post_init__(self) -> None:
        if self.point_count < 3:
            raise ValueError("point_count must be at least 3")
        if not 0.0 < self.base_radius_fraction < 1.0:
            raise ValueError("base_radius_fraction must be inside (0, 1)")


# Innermost first; radii are fractions of min(width, height).
RING_SPECS: tuple[RingSpec, ...] = (
    RingSpec(6, 0.055),
    RingSpec(12, 0.100),
    RingSpec(18, 0.148),
    RingSpec(24, 0.198),
    RingSpec(30, 0.250),
    RingSpec(36, 0.302),
    RingSpec(42, 0.356),
    RingSpec(48, 0.410),
)


@dataclass(frozen=True)
class FrameState:
    width: int
    height: int
    t: int = 0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("canvas dimensions must be positive")
        if self.t < 0:
            raise ValueError("frame counter must be non-negative")

    @property
    def min_dim(self) -> int:
        return min(self.width, self.height)

    def advance(self) -> FrameState:
        return replace(self, t=self.t + 1)

    def resized(self, width: int, height: int) -> FrameState:
        return replace(self, width=width, height=height)
