import pygame
import pytest

from breath.runtime.display_context import DisplayContext
from breath.runtime.event_pump import EventPump
from breath.runtime.streams import FrameStreams


@pytest.fixture
def display() -> DisplayContext:
    context = DisplayContext(size=(80, 60), vsync=False)
    context.initialize()
    return context


class TestEventPump:
    """Translate window events into loop flags and size updates."""

    def test_quit_event_stops_loop(self, display: DisplayContext) -> None:
        pump = EventPump(streams=FrameStreams(), display=display)
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        assert pump.pump(True) is False

    def test_resize_event_publishes_new_size(self, display: DisplayContext) -> None:
        streams = FrameStreams()
        pump = EventPump(streams=streams, display=display)
        pygame.event.post(
            pygame.event.Event(pygame.VIDEORESIZE, w=400, h=400, size=(400, 400))
        )

        assert pump.pump(True) is True
        assert streams.current_window_size == (400, 400)

    def test_on_resize_skips_duplicates_and_degenerate_sizes(
        self, display: DisplayContext
    ) -> None:
        streams = FrameStreams()
        seen: list[tuple[int, int] | None] = []
        streams.window_size.subscribe(seen.append)
        pump = EventPump(streams=streams, display=display)

        pump.on_resize(200, 100)
        pump.on_resize(200, 100)
        pump.on_resize(0, 100)

        assert seen == [None, (200, 100)]
