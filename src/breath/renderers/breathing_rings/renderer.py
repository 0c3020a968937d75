from __future__ import annotations

import pygame
import reactivex

from breath.renderers import StatefulBaseRenderer
from breath.renderers.breathing_rings.geometry import (FrameGeometry,
                                                       compose_frame)
from breath.renderers.breathing_rings.provider import FrameStateProvider
from breath.renderers.breathing_rings.state import (RING_SPECS, FrameState,
                                                    RingSpec)
from breath.renderers.drawing import PygameDrawingSurface
from breath.runtime.streams import FrameStreams
from breath.utilities.noise import CoherentNoise, NoiseFn


class BreathingRingsRenderer(StatefulBaseRenderer[FrameState]):
    """Concentric rings of points that slowly swell and contract."""

    def __init__(
        self,
        provider: FrameStateProvider | None = None,
        noise: NoiseFn | None = None,
        rings: tuple[RingSpec, ...] = RING_SPECS,
        *,
        state: FrameState | None = None,
    ) -> None:
        super().__init__(builder=provider, state=state)
        self._noise = noise if noise is not None else CoherentNoise.from_configuration()
        self._rings = rings
        self._last_geometry: FrameGeometry | None = None

    @property
    def last_geometry(self) -> FrameGeometry | None:
        return self._last_geometry

    def state_observable(
        self, streams: FrameStreams
    ) -> reactivex.Observable[FrameState]:
        if self.builder is None:
            self.builder = FrameStateProvider(streams)
        return self.builder.observable()

    def geometry(self, state: FrameState) -> FrameGeometry:
        return compose_frame(
            state.t, state.width, state.height, self._noise, self._rings
        )

    def real_process(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
    ) -> None:
        geometry = self.geometry(self.state)
        geometry.draw(PygameDrawingSurface(window))
        self._last_geometry = geometry
