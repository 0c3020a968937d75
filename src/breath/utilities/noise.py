"""Seeded coherent noise sampled over a 2D lattice.

Values come from a shuffled table of random floats, are eased between lattice
corners with a cosine curve and summed over several octaves. Each octave
doubles the frequency and multiplies the amplitude by ``persistence``. The sum
is normalised by the total amplitude so samples always fall inside [0, 1].

Inputs may be Python scalars or numpy arrays; arrays broadcast against each
other and scalar inputs produce a plain ``float``.
"""

from __future__ import annotations

from typing import Callable, TypeAlias

import numpy as np
from numpy.typing import ArrayLike

from breath.utilities.env import Configuration
from breath.utilities.logging import get_logger

logger = get_logger(__name__)

TABLE_SIZE = 4096
_TABLE_MASK = TABLE_SIZE - 1
DEFAULT_OCTAVES = 4
DEFAULT_PERSISTENCE = 0.5

NoiseFn: TypeAlias = Callable[[ArrayLike, ArrayLike], "float | np.ndarray"]


def _scaled_cosine(f: np.ndarray) -> np.ndarray:
    """Ease ``f`` in [0, 1) with half a cosine period."""
    return 0.5 * (1.0 - np.cos(f * np.pi))


def _mix(a: np.ndarray, b: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    return a * (1.0 - alpha) + b * alpha


class CoherentNoise:
    """Smooth pseudo-random field ``noise(x, y) -> [0, 1]``."""

    def __init__(
        self,
        seed: int | None = None,
        octaves: int = DEFAULT_OCTAVES,
        persistence: float = DEFAULT_PERSISTENCE,
    ) -> None:
        if octaves < 1:
            raise ValueError("octaves must be at least 1")
        if persistence <= 0.0:
            raise ValueError("persistence must be greater than 0")

        self.seed = seed
        self.octaves = octaves
        self.persistence = persistence

        rng = np.random.default_rng(seed)
        self._values = rng.random(TABLE_SIZE)
        self._permutation = rng.permutation(TABLE_SIZE)
        self._amplitudes = persistence ** np.arange(octaves, dtype=np.float64)
        self._norm = float(self._amplitudes.sum())

    @classmethod
    def from_configuration(cls) -> "CoherentNoise":
        noise = cls(
            seed=Configuration.noise_seed(),
            octaves=Configuration.noise_octaves(),
            persistence=Configuration.noise_persistence(),
        )
        logger.debug(
            "Seeded coherent noise (seed=%s, octaves=%s, persistence=%s)",
            noise.seed,
            noise.octaves,
            noise.persistence,
        )
        return noise

    def _lattice(self, ix: np.ndarray, iy: np.ndarray) -> np.ndarray:
        # Masking int64 keeps negative lattice coordinates inside the table.
        index = self._permutation[ix & _TABLE_MASK]
        return self._values[self._permutation[(index + iy) & _TABLE_MASK]]

    def _smooth(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        ix = np.floor(x).astype(np.int64)
        iy = np.floor(y).astype(np.int64)
        fx = _scaled_cosine(x - ix)
        fy = _scaled_cosine(y - iy)

        bl = self._lattice(ix, iy)
        br = self._lattice(ix + 1, iy)
        tl = self._lattice(ix, iy + 1)
        tr = self._lattice(ix + 1, iy + 1)
        return _mix(_mix(bl, br, fx), _mix(tl, tr, fx), fy)

    def __call__(self, x: ArrayLike, y: ArrayLike = 0.0) -> float | np.ndarray:
        x_arr, y_arr = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
        )
        total = np.zeros(x_arr.shape, dtype=np.float64)
        frequency = 1.0
        for amplitude in self._amplitudes:
            total += self._smooth(x_arr * frequency, y_arr * frequency) * amplitude
            frequency *= 2.0

        result = np.clip(total / self._norm, 0.0, 1.0)
        if result.ndim == 0:
            return float(result)
        return result
