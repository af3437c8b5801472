"""Tests for container wiring."""

from nutrition_engine.config import Settings
from nutrition_engine.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.journal_service.classifier is container.status_classifier
    assert container.hydration_service.target_glasses == 8


def test_build_container_applies_guideline_overrides() -> None:
    settings = Settings(
        salt_cap_mg=2000,
        restricted_salt_cap_mg=1200,
        water_target_glasses=10,
        debug=True,
    )

    container = build_container(settings)

    guidelines = container.target_calculator.guidelines
    assert guidelines.salt_cap_mg == 2000
    assert guidelines.restricted_salt_cap_mg == 1200
    assert container.target_calculator.debug is True
    assert container.food_risk_service.debug is True
    assert container.hydration_service.target_glasses == 10
