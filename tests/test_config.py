"""Tests for settings loading."""

from feeding_planner.config import Settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.default_fluid_limit_ml == 2500
    assert settings.enteral_default_volume_ml == 300
    assert settings.parenteral_default_volume_ml == 500
    assert settings.debug is False


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("FEEDING_PLANNER_DEFAULT_FLUID_LIMIT_ML", "1800")
    monkeypatch.setenv("FEEDING_PLANNER_DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.default_fluid_limit_ml == 1800
    assert settings.debug is True
