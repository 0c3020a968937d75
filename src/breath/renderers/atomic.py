from __future__ import annotations

import time
from typing import Generic, TypeVar

import pygame

from breath.runtime.streams import FrameStreams
from breath.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class AtomicBaseRenderer(Generic[StateT]):
    """Base renderer that manages an immutable state snapshot."""

    def __init__(self, *args, **kwargs) -> None:
        self.initialized = False
        self._state: StateT | None = None

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: FrameStreams,
    ) -> None:
        raise NotImplementedError

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    @property
    def name(self):
        return self.__class__.__name__

    def is_initialized(self) -> bool:
        return self.initialized

    def real_process(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
    ) -> None:
        raise NotImplementedError("Please implement")

    def _internal_process(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
    ) -> None:
        if not self.is_initialized():
            raise ValueError("Needs to be initialized")

        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000

        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def reset(self):
        pass
