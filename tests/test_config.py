"""Tests for settings loading."""

from nutrition_engine.config import Settings
from nutrition_engine.domain.guidelines import FALLBACK_TARGETS, GuidelineTables


def test_settings_defaults_need_no_environment() -> None:
    settings = Settings()

    assert settings.salt_cap_mg == 2300
    assert settings.restricted_salt_cap_mg == 1500
    assert settings.water_target_glasses == 8
    assert settings.guidelines() == GuidelineTables()


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SALT_CAP_MG", "2000")
    monkeypatch.setenv("WATER_TARGET_GLASSES", "6")

    settings = Settings()

    assert settings.salt_cap_mg == 2000
    assert settings.water_target_glasses == 6
    assert settings.guidelines().salt_cap_mg == 2000
    assert settings.guidelines().fallback == FALLBACK_TARGETS
