from __future__ import annotations

import pytest

from breath.utilities.env import Configuration


class TestConfiguration:
    """Cover environment-backed defaults and validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BREATH_VSYNC", raising=False)

        assert Configuration.window_size() == (800, 800)
        assert Configuration.max_fps() == 60
        assert Configuration.vsync_enabled() is True
        assert Configuration.noise_seed() is None
        assert Configuration.noise_octaves() == 4
        assert Configuration.noise_persistence() == 0.5

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BREATH_WINDOW_WIDTH", "1024")
        monkeypatch.setenv("BREATH_WINDOW_HEIGHT", "768")
        monkeypatch.setenv("BREATH_MAX_FPS", "0")
        monkeypatch.setenv("BREATH_NOISE_SEED", "5")

        assert Configuration.window_size() == (1024, 768)
        assert Configuration.max_fps() == 0
        assert Configuration.noise_seed() == 5

    @pytest.mark.parametrize(
        ("env_var", "value", "accessor"),
        [
            ("BREATH_WINDOW_WIDTH", "0", Configuration.window_width),
            ("BREATH_MAX_FPS", "-1", Configuration.max_fps),
            ("BREATH_NOISE_OCTAVES", "0", Configuration.noise_octaves),
            ("BREATH_NOISE_PERSISTENCE", "1.5", Configuration.noise_persistence),
            ("BREATH_NOISE_PERSISTENCE", "0", Configuration.noise_persistence),
            ("BREATH_NOISE_SEED", "-3", Configuration.noise_seed),
        ],
    )
    def test_invalid_values_name_the_variable(
        self,
        monkeypatch: pytest.MonkeyPatch,
        env_var: str,
        value: str,
        accessor,
    ) -> None:
        monkeypatch.setenv(env_var, value)

        with pytest.raises(ValueError, match=env_var):
            accessor()
