from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from breath.runtime.display_context import DisplayContext
from breath.runtime.event_pump import EventPump
from breath.runtime.streams import FrameStreams
from breath.utilities.env.display import DEFAULT_MAX_FPS
from breath.utilities.logging import get_logger

if TYPE_CHECKING:
    from breath.renderers import StatefulBaseRenderer

logger = get_logger(__name__)


class GameLoop:
    def __init__(
        self,
        display: DisplayContext,
        streams: FrameStreams,
        event_pump: EventPump,
        max_fps: int = DEFAULT_MAX_FPS,
    ) -> None:
        self.display = display
        self.streams = streams
        self.event_pump = event_pump
        self.max_fps = max_fps
        self.renderers: list["StatefulBaseRenderer[Any]"] = []
        self.initialized = False
        self.running = False
        self.frame_index = 0

    def add_renderer(self, renderer: "StatefulBaseRenderer[Any]") -> None:
        self.renderers.append(renderer)

    def start(self, max_frames: int | None = None) -> None:
        logger.info("Starting GameLoop")
        if not self.renderers:
            raise RuntimeError("Unable to start as no renderers were added.")

        if not self.initialized:
            logger.info("GameLoop not yet initialized, initializing...")
            self._initialize()
            logger.info("Finished initializing GameLoop.")

        self.running = True
        logger.info("Entering main loop.")
        try:
            self._run_main_loop(max_frames)
        finally:
            for renderer in self.renderers:
                renderer.reset()
            pygame.quit()
            logger.info("GameLoop stopped after %s frames", self.frame_index)

    def _initialize(self) -> None:
        self.display.initialize()
        self.display.ensure_initialized()
        self.streams.publish_window_size(*self.display.get_size())
        for renderer in self.renderers:
            renderer.initialize(self.display.screen, self.display.clock, self.streams)
        self.initialized = True

    def _run_main_loop(self, max_frames: int | None) -> None:
        while self.running:
            self.running = self.event_pump.pump(self.running)
            if not self.running:
                break
            self._one_loop()
            if max_frames is not None and self.frame_index >= max_frames:
                self.running = False
                break
            self.display.clock.tick(self.max_fps)

    def _one_loop(self) -> None:
        if self.display.screen is None or self.display.clock is None:
            raise RuntimeError("GameLoop screen is not initialized")
        for renderer in self.renderers:
            renderer._internal_process(self.display.screen, self.display.clock)
        pygame.display.flip()
        # Renderers advance their frame counter on this tick.
        self.streams.publish_tick(self.frame_index)
        self.frame_index += 1
