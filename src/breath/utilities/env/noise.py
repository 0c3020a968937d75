from breath.utilities.env.parsing import _env_float, _env_int, _env_optional_int

DEFAULT_NOISE_OCTAVES = 4
DEFAULT_NOISE_PERSISTENCE = 0.5


class NoiseConfiguration:
    @classmethod
    def noise_seed(cls) -> int | None:
        return _env_optional_int("BREATH_NOISE_SEED", minimum=0)

    @classmethod
    def noise_octaves(cls) -> int:
        return _env_int(
            "BREATH_NOISE_OCTAVES", default=DEFAULT_NOISE_OCTAVES, minimum=1
        )

    @classmethod
    def noise_persistence(cls) -> float:
        return _env_float(
            "BREATH_NOISE_PERSISTENCE",
            default=DEFAULT_NOISE_PERSISTENCE,
            minimum=0.0,
            maximum=1.0,
            exclusive_minimum=True,
        )
