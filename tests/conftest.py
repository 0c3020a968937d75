import os
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np
import pygame
import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def clean_breath_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop BREATH_* overrides from the developer shell so defaults stay deterministic."""

    for name in list(os.environ):
        if name.startswith("BREATH_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BREATH_VSYNC", "0")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


def _constant_noise(value: float) -> Callable[[Any, Any], np.ndarray]:
    def noise(x: Any, y: Any) -> np.ndarray:
        shape = np.broadcast(np.asarray(x), np.asarray(y)).shape
        return np.full(shape, value, dtype=np.float64)

    return noise


@pytest.fixture
def constant_noise_factory() -> Callable[[float], Callable[[Any, Any], np.ndarray]]:
    return _constant_noise


@pytest.fixture
def neutral_noise() -> Callable[[Any, Any], np.ndarray]:
    """Noise pinned to 0.5 so every jitter term vanishes."""

    return _constant_noise(0.5)


@dataclass
class RecordingSurface:
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def clear(self, color) -> None:
        self.calls.append(("clear", (color,)))

    def draw_polyline(self, points, color, width, closed) -> None:
        self.calls.append(("polyline", (points, color, width, closed)))

    def draw_circle(self, center, diameter, color) -> None:
        self.calls.append(("circle", (center, diameter, color)))

    def draw_line(self, start, end, color, width) -> None:
        self.calls.append(("line", (start, end, color, width)))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.calls]


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
