"""Guideline policy tables for daily targets.

Each adjustment is an ordered rule list evaluated top to bottom where the
first matching rule wins. Conditions are never combined: a profile with
diabetes and high cholesterol receives only the diabetes ratio.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from nutrition_engine.domain.conditions import ConditionSet, ConditionTag
from nutrition_engine.domain.nutrition import NutrientTargets
from nutrition_engine.domain.profile import Profile

T = TypeVar("T")

ProfilePredicate = Callable[[Profile], bool]

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9
KCAL_PER_G_SUGAR = 4

FALLBACK_TARGETS = NutrientTargets(
    calories=2000,
    protein_g=100,
    carbs_g=250,
    fat_g=70,
    sugar_g=50,
    salt_mg=2000,
    fiber_g=30,
)


@dataclass(frozen=True)
class MacroRatio:
    """Share of daily energy per macronutrient."""

    carbs: float
    protein: float
    fat: float


@dataclass(frozen=True)
class PolicyRule(Generic[T]):
    """A named predicate paired with the value it selects."""

    name: str
    applies: ProfilePredicate
    value: T


def has_condition(condition: ConditionTag) -> ProfilePredicate:
    """Predicate matching profiles that report ``condition``."""

    def predicate(profile: Profile) -> bool:
        return profile.has(condition)

    return predicate


def bmi_above(threshold: float) -> ProfilePredicate:
    """Predicate matching profiles whose BMI exceeds ``threshold``."""

    def predicate(profile: Profile) -> bool:
        return profile.bmi > threshold

    return predicate


def first_match(rules: Sequence[PolicyRule[T]], profile: Profile, default: T) -> T:
    """Return the value of the first rule that applies, else ``default``."""
    for rule in rules:
        if rule.applies(profile):
            return rule.value
    return default


DEFAULT_MACRO_RATIO = MacroRatio(carbs=0.50, protein=0.20, fat=0.30)

MACRO_RATIO_RULES: tuple[PolicyRule[MacroRatio], ...] = (
    PolicyRule(
        "diabetes",
        has_condition(ConditionTag.DIABETES),
        MacroRatio(carbs=0.45, protein=0.25, fat=0.30),
    ),
    PolicyRule(
        "high-cholesterol",
        has_condition(ConditionTag.HIGH_CHOLESTEROL),
        MacroRatio(carbs=0.55, protein=0.20, fat=0.25),
    ),
    PolicyRule(
        "gout",
        has_condition(ConditionTag.GOUT),
        MacroRatio(carbs=0.55, protein=0.15, fat=0.30),
    ),
)

DEFAULT_SUGAR_SHARE = 0.10

# Share of daily energy allowed as sugar.
SUGAR_SHARE_RULES: tuple[PolicyRule[float], ...] = (
    PolicyRule("diabetes", has_condition(ConditionTag.DIABETES), 0.05),
    PolicyRule("overweight", bmi_above(25), 0.07),
)


@dataclass(frozen=True)
class GuidelineTables:
    """All constants the target calculator depends on."""

    macro_rules: tuple[PolicyRule[MacroRatio], ...] = MACRO_RATIO_RULES
    default_macro_ratio: MacroRatio = DEFAULT_MACRO_RATIO
    sugar_rules: tuple[PolicyRule[float], ...] = SUGAR_SHARE_RULES
    default_sugar_share: float = DEFAULT_SUGAR_SHARE
    salt_cap_mg: int = 2300
    restricted_salt_cap_mg: int = 1500
    salt_restricting_conditions: ConditionSet = frozenset(
        {ConditionTag.HYPERTENSION, ConditionTag.KIDNEY}
    )
    fiber_g_per_1000_kcal: float = 14
    fiber_boost_conditions: ConditionSet = frozenset({ConditionTag.DIABETES})
    fiber_boost: float = 1.2
    fallback: NutrientTargets = FALLBACK_TARGETS

    def macro_ratio(self, profile: Profile) -> MacroRatio:
        """Return the macro split for ``profile``."""
        return first_match(self.macro_rules, profile, self.default_macro_ratio)

    def sugar_share(self, profile: Profile) -> float:
        """Return the share of energy allowed as sugar for ``profile``."""
        return first_match(self.sugar_rules, profile, self.default_sugar_share)

    def salt_cap(self, profile: Profile) -> int:
        """Return the daily salt ceiling in milligrams."""
        if profile.conditions & self.salt_restricting_conditions:
            return self.restricted_salt_cap_mg
        return self.salt_cap_mg
