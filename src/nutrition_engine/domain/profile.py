"""Physiological profile used to derive daily targets."""

import calendar
import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from nutrition_engine.domain.conditions import (
    NO_CONDITIONS,
    ConditionSet,
    ConditionTag,
    normalize_conditions,
)


class Sex(str, Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(float, Enum):
    """Activity multipliers applied to BMR."""

    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    ACTIVE = 1.725
    VERY_ACTIVE = 1.9


def resolve_sex(raw: object) -> Sex:
    """Resolve a sex label case-insensitively; unknown labels raise ValueError."""
    if isinstance(raw, Sex):
        return raw
    return Sex(str(raw).strip().lower())


def resolve_activity(raw: object) -> ActivityLevel:
    """Resolve a multiplier, numeric string or level name; default sedentary."""
    if isinstance(raw, ActivityLevel):
        return raw
    if isinstance(raw, str):
        name = raw.strip().upper().replace("-", "_").replace(" ", "_")
        if name in ActivityLevel.__members__:
            return ActivityLevel[name]
        try:
            raw = float(raw)
        except ValueError:
            return ActivityLevel.SEDENTARY
    if isinstance(raw, int | float) and not isinstance(raw, bool):
        for level in ActivityLevel:
            if math.isclose(raw, level.value, abs_tol=1e-9):
                return level
    return ActivityLevel.SEDENTARY


def age_on(date_of_birth: date, today: date) -> int:
    """Return whole years elapsed between birth and ``today``, never negative.

    A 29 February birthday falls on 28 February in common years.
    """
    years = today.year - date_of_birth.year
    birthday_day = min(
        date_of_birth.day, calendar.monthrange(today.year, date_of_birth.month)[1]
    )
    if (today.month, today.day) < (date_of_birth.month, birthday_day):
        years -= 1
    return max(years, 0)


@dataclass(frozen=True)
class Profile:
    """Physiological and medical facts for one evaluation.

    Callers validate shapes before construction: weight and height must be
    positive numbers. Activity and conditions are normalized here so the
    rest of the engine only ever sees canonical values.
    """

    sex: Sex
    weight_kg: float
    height_cm: float
    date_of_birth: date
    activity_factor: ActivityLevel = ActivityLevel.SEDENTARY
    conditions: ConditionSet = field(default=NO_CONDITIONS)

    def __post_init__(self) -> None:
        if self.weight_kg <= 0 or self.height_cm <= 0:
            msg = "weight_kg and height_cm must be positive"
            raise ValueError(msg)
        object.__setattr__(self, "sex", resolve_sex(self.sex))
        object.__setattr__(
            self, "activity_factor", resolve_activity(self.activity_factor)
        )
        object.__setattr__(self, "conditions", normalize_conditions(self.conditions))

    def age(self, today: date) -> int:
        """Return the age in whole years on ``today``."""
        return age_on(self.date_of_birth, today)

    @property
    def bmi(self) -> float:
        """Body mass index from weight and height."""
        height_m = self.height_cm / 100
        return self.weight_kg / (height_m * height_m)

    def has(self, condition: ConditionTag) -> bool:
        """Return True when the profile reports ``condition``."""
        return condition in self.conditions
