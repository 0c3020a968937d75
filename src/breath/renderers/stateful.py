from __future__ import annotations

from typing import Generic

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from breath.renderers.atomic import AtomicBaseRenderer, StateT
from breath.runtime.providers import ObservableProvider, StaticStateProvider
from breath.runtime.streams import FrameStreams


class StatefulBaseRenderer(AtomicBaseRenderer[StateT], Generic[StateT]):
    """Renderer whose state snapshots arrive from an observable provider."""

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        *args,
        state: StateT | None = None,
        **kwargs,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("StatefulBaseRenderer expects either builder or state")
        if builder is None and state is not None:
            builder = StaticStateProvider(state)
        self.builder = builder
        self._subscription: Disposable | None = None
        super().__init__(*args, **kwargs)

    def state_observable(self, streams: FrameStreams) -> Observable[StateT]:
        if self.builder is None:
            raise ValueError("StatefulBaseRenderer requires a builder or state")
        return self.builder.observable()

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: FrameStreams,
    ) -> None:
        observable = self.state_observable(streams)
        self._subscription = observable.subscribe(on_next=self.set_state)
        if self._state is None:
            raise RuntimeError(f"{self.name} received no initial state")
        self.initialized = True

    def reset(self):
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.initialized = False
        super().reset()
