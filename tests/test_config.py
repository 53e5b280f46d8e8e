"""Unit tests for configuration defaults and environment overrides."""

from __future__ import annotations

import importlib

import pytest

import werks.config
from werks.config import Config

OVERRIDES = {
    "WERKS_LOG_LEVEL": "DEBUG",
    "WERKS_LOG_FILE": "werks.log",
    "WERKS_MAP_TILES": "CartoDB positron",
    "WERKS_BULLSEYE_ZOOM": "9",
    "WERKS_MAP_FILE": "rings.html",
    "WERKS_BANDS": "10, 20",
    "WERKS_COLOR_SCHEME": "2",
    "WERKS_DOT_PLOT_THRESHOLD": "0.5",
    "WERKS_DOT_PLOT_TREND_DEGREE": "2",
}


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):
    """Re-read the environment into a fresh Config, restoring it afterwards."""

    def _reload(env: dict[str, str]) -> type:
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(werks.config).Config

    yield _reload

    monkeypatch.undo()
    importlib.reload(werks.config)


class TestConfig:
    def test_five_palettes_of_five(self) -> None:
        assert len(Config.BAND_PALETTES) == 5
        assert all(len(palette) == 5 for palette in Config.BAND_PALETTES)

    def test_default_scheme(self) -> None:
        assert Config.get_palette(Config.DEFAULT_COLOR_SCHEME)[0] == "#D32F2F"

    def test_palette_is_one_based(self) -> None:
        assert Config.get_palette(1) == Config.BAND_PALETTES[0]

    @pytest.mark.parametrize("index", [0, 6, "1", 2.0])
    def test_bad_index(self, index) -> None:
        with pytest.raises(ValueError):
            Config.get_palette(index)


class TestEnvironmentOverrides:
    """Every WERKS_* variable lands on the matching setting."""

    def test_overrides_applied(self, reload_config) -> None:
        config = reload_config(OVERRIDES)

        assert config.LOG_LEVEL == "DEBUG"
        assert config.LOG_FILE == "werks.log"
        assert config.MAP_TILES == "CartoDB positron"
        assert config.BULLSEYE_ZOOM == 9
        assert config.DEFAULT_MAP_FILE == "rings.html"
        assert config.DEFAULT_BANDS == "10, 20"
        assert config.DEFAULT_COLOR_SCHEME == 2
        assert config.DOT_PLOT_THRESHOLD == pytest.approx(0.5)
        assert config.DOT_PLOT_TREND_DEGREE == 2

    def test_unprefixed_names_ignored(self, reload_config, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in OVERRIDES:
            monkeypatch.delenv(name, raising=False)

        config = reload_config({"LOG_LEVEL": "DEBUG", "BULLSEYE_ZOOM": "3"})

        assert config.LOG_LEVEL == "INFO"
        assert config.BULLSEYE_ZOOM == 7

    def test_bad_number_fails_at_import(self, reload_config) -> None:
        with pytest.raises(ValueError):
            reload_config({"WERKS_BULLSEYE_ZOOM": "close"})
