from __future__ import annotations

import pygame

from breath.runtime.display_context import DisplayContext
from breath.runtime.streams import FrameStreams
from breath.utilities.logging import get_logger

logger = get_logger(__name__)


class EventPump:
    """Process pygame events and update runtime flags."""

    def __init__(self, streams: FrameStreams, display: DisplayContext) -> None:
        self._streams = streams
        self._display = display

    def pump(self, running: bool) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)
            elif event.type == pygame.WINDOWSIZECHANGED:
                self.on_resize(event.x, event.y)
        return running

    def on_resize(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            logger.debug("Ignoring degenerate window size %sx%s", width, height)
            return
        if self._streams.current_window_size == (width, height):
            return
        self._display.refresh_screen()
        logger.info("Window resized to %sx%s", width, height)
        self._streams.publish_window_size(width, height)
