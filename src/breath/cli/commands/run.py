from typing import Any, Optional

import typer

from breath.renderers.breathing_rings import BreathingRingsRenderer
from breath.runtime.container import build_runtime_container
from breath.runtime.display_context import DisplayContext
from breath.runtime.game_loop import GameLoop
from breath.utilities.env import Configuration
from breath.utilities.logging import get_logger
from breath.utilities.noise import CoherentNoise

logger = get_logger(__name__)


def _runtime_overrides(
    width: Optional[int], height: Optional[int], seed: Optional[int]
) -> dict[type[Any], object]:
    # Environment values are read here so bad settings surface before the
    # container starts building anything.
    default_width, default_height = Configuration.window_size()
    display = DisplayContext(
        size=(width or default_width, height or default_height),
        vsync=Configuration.vsync_enabled(),
    )
    noise = CoherentNoise(
        seed=seed if seed is not None else Configuration.noise_seed(),
        octaves=Configuration.noise_octaves(),
        persistence=Configuration.noise_persistence(),
    )
    return {DisplayContext: display, CoherentNoise: noise}


def run_command(
    width: Optional[int] = typer.Option(
        None, "--width", min=1, help="Initial window width in pixels"
    ),
    height: Optional[int] = typer.Option(
        None, "--height", min=1, help="Initial window height in pixels"
    ),
    max_fps: Optional[int] = typer.Option(
        None, "--max-fps", min=0, help="Frame rate cap (0 disables the cap)"
    ),
    frames: Optional[int] = typer.Option(
        None, "--frames", min=1, help="Stop after this many frames"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", min=0, help="Seed for the noise field"
    ),
) -> None:
    try:
        overrides = _runtime_overrides(width, height, seed)
        configured_fps = Configuration.max_fps()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1)

    resolver = build_runtime_container(overrides=overrides)
    loop = resolver[GameLoop]
    loop.max_fps = max_fps if max_fps is not None else configured_fps
    loop.add_renderer(resolver[BreathingRingsRenderer])

    try:
        loop.start(max_frames=frames)
    except RuntimeError as exc:
        logger.error("Failed to start: %s", exc)
        raise typer.Exit(code=1)
