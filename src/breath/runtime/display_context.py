from __future__ import annotations

from dataclasses import dataclass

import pygame

from breath.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "Breathing Order"


@dataclass
class DisplayContext:
    """Track and initialize pygame display resources."""

    size: tuple[int, int]
    vsync: bool = True
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        try:
            pygame.init()
            self.screen = self._set_mode()
        except pygame.error as exc:
            raise RuntimeError(f"Unable to initialize display: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        logger.info("Display initialized at %sx%s", *self.get_size())

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")

    def refresh_screen(self) -> None:
        """Pick up the surface pygame recreated after a window resize."""
        surface = pygame.display.get_surface()
        if surface is not None:
            self.screen = surface
            self.size = surface.get_size()

    def _set_mode(self) -> pygame.Surface:
        if self.vsync:
            try:
                return pygame.display.set_mode(self.size, pygame.RESIZABLE, vsync=1)
            except pygame.error as exc:
                logger.warning("vsync unavailable, falling back: %s", exc)
        return pygame.display.set_mode(self.size, pygame.RESIZABLE)

    def get_size(self) -> tuple[int, int]:
        if self.screen is None:
            return self.size
        return self.screen.get_size()
