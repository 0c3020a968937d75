from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from breath.renderers.breathing_rings import (BreathingRingsRenderer,
                                              FrameStateProvider)
from breath.runtime.display_context import DisplayContext
from breath.runtime.event_pump import EventPump
from breath.runtime.game_loop import GameLoop
from breath.runtime.streams import FrameStreams
from breath.utilities.env import Configuration
from breath.utilities.logging import get_logger
from breath.utilities.noise import CoherentNoise

logger = get_logger(__name__)

RuntimeContainer = Container


def _build_display_context(_: RuntimeContainer) -> DisplayContext:
    return DisplayContext(
        size=Configuration.window_size(),
        vsync=Configuration.vsync_enabled(),
    )


def _build_event_pump(resolver: RuntimeContainer) -> EventPump:
    return EventPump(streams=resolver[FrameStreams], display=resolver[DisplayContext])


def _build_game_loop(resolver: RuntimeContainer) -> GameLoop:
    return GameLoop(
        display=resolver[DisplayContext],
        streams=resolver[FrameStreams],
        event_pump=resolver[EventPump],
        max_fps=Configuration.max_fps(),
    )


def _build_noise(_: RuntimeContainer) -> CoherentNoise:
    return CoherentNoise.from_configuration()


def _build_frame_state_provider(resolver: RuntimeContainer) -> FrameStateProvider:
    return FrameStateProvider(
        streams=resolver[FrameStreams],
        default_size=resolver[DisplayContext].size,
    )


def _build_breathing_rings_renderer(
    resolver: RuntimeContainer,
) -> BreathingRingsRenderer:
    return BreathingRingsRenderer(
        provider=resolver[FrameStateProvider],
        noise=resolver[CoherentNoise],
    )


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value


def build_runtime_container(
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = RuntimeContainer()
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, FrameStreams, Singleton(FrameStreams))
    _bind(container, overrides, DisplayContext, Singleton(_build_display_context))
    _bind(container, overrides, EventPump, Singleton(_build_event_pump))
    _bind(container, overrides, CoherentNoise, Singleton(_build_noise))
    _bind(
        container,
        overrides,
        FrameStateProvider,
        Singleton(_build_frame_state_provider),
    )
    _bind(
        container,
        overrides,
        BreathingRingsRenderer,
        Singleton(_build_breathing_rings_renderer),
    )
    _bind(container, overrides, GameLoop, Singleton(_build_game_loop))
    return container
