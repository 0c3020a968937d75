import pygame
import pytest

from breath.renderers.breathing_rings import BreathingRingsRenderer
from breath.runtime.display_context import DisplayContext
from breath.runtime.event_pump import EventPump
from breath.runtime.game_loop import GameLoop
from breath.runtime.streams import FrameStreams


def _build_loop(size: tuple[int, int] = (64, 48)) -> GameLoop:
    streams = FrameStreams()
    display = DisplayContext(size=size, vsync=False)
    return GameLoop(
        display=display,
        streams=streams,
        event_pump=EventPump(streams=streams, display=display),
        max_fps=0,
    )


class TestGameLoopBehavior:
    """Cover core GameLoop invariants so the frame loop stays predictable."""

    def test_one_loop_requires_initialized_screen(self) -> None:
        loop = _build_loop()

        with pytest.raises(RuntimeError, match="screen is not initialized"):
            loop._one_loop()

    def test_start_requires_renderers(self) -> None:
        loop = _build_loop()

        with pytest.raises(RuntimeError, match="no renderers"):
            loop.start(max_frames=1)

    def test_runs_requested_number_of_frames(self, neutral_noise) -> None:
        """Verify each loop iteration renders once and advances the frame counter by one."""
        loop = _build_loop()
        renderer = BreathingRingsRenderer(noise=neutral_noise)
        loop.add_renderer(renderer)

        loop.start(max_frames=3)

        assert loop.frame_index == 3
        assert renderer.last_geometry is not None
        assert renderer.last_geometry.t == 2
        assert (renderer.last_geometry.width, renderer.last_geometry.height) == (64, 48)
        assert not renderer.is_initialized()

    def test_quit_event_stops_before_rendering(
        self, neutral_noise, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        loop = _build_loop()
        renderer = BreathingRingsRenderer(noise=neutral_noise)
        loop.add_renderer(renderer)
        monkeypatch.setattr(loop.event_pump, "pump", lambda running: False)

        loop.start()

        assert loop.frame_index == 0
        assert renderer.last_geometry is None

    def test_display_failure_is_fatal(
        self, neutral_noise, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Ensure a display that cannot be acquired aborts startup instead of retrying."""

        def _fail(*_args, **_kwargs):
            raise pygame.error("no video device")

        monkeypatch.setattr(pygame.display, "set_mode", _fail)
        loop = _build_loop()
        loop.add_renderer(BreathingRingsRenderer(noise=neutral_noise))

        with pytest.raises(RuntimeError, match="Unable to initialize display"):
            loop.start(max_frames=1)
