from __future__ import annotations

import pytest

from breath.renderers.breathing_rings.state import (RING_SPECS, FrameState,
                                                    RingSpec)


class TestRingSpecs:
    """Guard the fixed ring layout the animation is tuned around."""

    def test_layout_has_eight_rings_growing_outwards(self) -> None:
        assert [spec.point_count for spec in RING_SPECS] == [
            6, 12, 18, 24, 30, 36, 42, 48
        ]
        fractions = [spec.base_radius_fraction for spec in RING_SPECS]
        assert fractions == sorted(fractions)
        assert fractions[0] == 0.055
        assert fractions[-1] == 0.410

    @pytest.mark.parametrize(
        ("point_count", "fraction"),
        [(2, 0.5), (6, 0.0), (6, 1.0), (6, -0.1)],
    )
    def test_invalid_specs_are_rejected(
        self, point_count: int, fraction: float
    ) -> None:
        with pytest.raises(ValueError):
            RingSpec(point_count, fraction)


class TestFrameState:
    def test_advance_increments_by_one(self) -> None:
        state = FrameState(width=800, height=600)

        advanced = state.advance().advance()

        assert state.t == 0
        assert advanced.t == 2
        assert (advanced.width, advanced.height) == (800, 600)

    def test_resized_keeps_counter(self) -> None:
        state = FrameState(width=800, height=600, t=41)

        resized = state.resized(400, 400)

        assert resized.t == 41
        assert resized.min_dim == 400
        assert state.min_dim == 600

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 0, "height": 10},
            {"width": 10, "height": -1},
            {"width": 10, "height": 10, "t": -1},
        ],
    )
    def test_invalid_state_is_rejected(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            FrameState(**kwargs)
