"""Hydration domain models."""

from dataclasses import dataclass
from enum import Enum


class HydrationLevel(str, Enum):
    """How close the user is to the daily water target."""

    DEHYDRATED = "dehydrated"
    LOW = "low"
    NEAR_TARGET = "near_target"
    HYDRATED = "hydrated"


# Upper glass counts (inclusive) for each level; anything above is HYDRATED.
HYDRATION_BANDS: tuple[tuple[int, HydrationLevel], ...] = (
    (2, HydrationLevel.DEHYDRATED),
    (4, HydrationLevel.LOW),
    (6, HydrationLevel.NEAR_TARGET),
)


@dataclass(frozen=True)
class HydrationStatus:
    """Water intake for a day against the target."""

    glasses: int
    target_glasses: int
    level: HydrationLevel
    fill_pct: float
