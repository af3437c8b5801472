"""Shared test fixtures."""

from datetime import date

import pytest

from nutrition_engine.config import Settings
from nutrition_engine.containers import AppContainer, build_container
from nutrition_engine.domain.profile import ActivityLevel, Profile, Sex

EVALUATION_DAY = date(2024, 6, 15)


def make_profile(  # noqa: PLR0913
    *,
    sex: Sex | str = Sex.MALE,
    weight_kg: float = 70,
    height_cm: float = 175,
    age: int = 30,
    activity_factor: object = ActivityLevel.SEDENTARY,
    conditions: object = None,
) -> Profile:
    """Build a profile whose age on ``EVALUATION_DAY`` is exactly ``age``."""
    return Profile(
        sex=sex,
        weight_kg=weight_kg,
        height_cm=height_cm,
        date_of_birth=EVALUATION_DAY.replace(year=EVALUATION_DAY.year - age),
        activity_factor=activity_factor,
        conditions=conditions,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def profile_payload() -> dict[str, object]:
    return {
        "sex": "male",
        "weight_kg": 70,
        "height_cm": 175,
        "date_of_birth": "1994-06-15",
        "activity_factor": 1.2,
        "conditions": [],
    }
