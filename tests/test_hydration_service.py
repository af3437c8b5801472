"""Tests for hydration status."""

import pytest

from nutrition_engine.domain.hydration import HydrationLevel
from nutrition_engine.services.hydration import HydrationService


@pytest.mark.parametrize(
    ("glasses", "level"),
    [
        (0, HydrationLevel.DEHYDRATED),
        (2, HydrationLevel.DEHYDRATED),
        (3, HydrationLevel.LOW),
        (4, HydrationLevel.LOW),
        (6, HydrationLevel.NEAR_TARGET),
        (7, HydrationLevel.HYDRATED),
        (12, HydrationLevel.HYDRATED),
    ],
)
def test_hydration_levels(glasses: int, level: HydrationLevel) -> None:
    assert HydrationService().status(glasses).level is level


def test_fill_percentage_is_capped() -> None:
    service = HydrationService(target_glasses=8)

    assert service.status(4).fill_pct == pytest.approx(50)
    assert service.status(10).fill_pct == 100


def test_negative_count_is_clamped() -> None:
    status = HydrationService().status(-3)

    assert status.glasses == 0
    assert status.level is HydrationLevel.DEHYDRATED
