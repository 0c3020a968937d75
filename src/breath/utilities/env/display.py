from breath.utilities.env.parsing import _env_flag, _env_int

DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 800
DEFAULT_MAX_FPS = 60


class DisplayConfiguration:
    @classmethod
    def window_width(cls) -> int:
        return _env_int("BREATH_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1)

    @classmethod
    def window_height(cls) -> int:
        return _env_int(
            "BREATH_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1
        )

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return cls.window_width(), cls.window_height()

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("BREATH_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=0)

    @classmethod
    def vsync_enabled(cls) -> bool:
        return _env_flag("BREATH_VSYNC", default=True)
