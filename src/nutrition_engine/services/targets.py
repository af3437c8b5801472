"""Personalized daily target calculation."""

import logging
from dataclasses import dataclass, field
from datetime import date

from nutrition_engine.domain.guidelines import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    KCAL_PER_G_SUGAR,
    GuidelineTables,
)
from nutrition_engine.domain.nutrition import NutrientTargets, round_half_up
from nutrition_engine.domain.profile import Profile, Sex

_SEX_OFFSET = {Sex.MALE: 5, Sex.FEMALE: -161}

_logger = logging.getLogger(__name__)


def basal_metabolic_rate(profile: Profile, age: int) -> float:
    """Mifflin-St Jeor resting energy expenditure in kcal."""
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * age
        + _SEX_OFFSET[profile.sex]
    )


@dataclass
class TargetCalculator:
    """Derives daily nutrient targets from a profile and guideline tables."""

    guidelines: GuidelineTables = field(default_factory=GuidelineTables)
    debug: bool = False

    def compute(
        self, profile: Profile | None, today: date | None = None
    ) -> NutrientTargets:
        """Return daily targets, or the fallback set when there is no profile."""
        if profile is None:
            return self.guidelines.fallback

        tdee = self.total_energy(profile, today or date.today())
        ratio = self.guidelines.macro_ratio(profile)
        sugar_share = self.guidelines.sugar_share(profile)

        fiber = round_half_up(tdee / 1000 * self.guidelines.fiber_g_per_1000_kcal)
        if profile.conditions & self.guidelines.fiber_boost_conditions:
            fiber = round_half_up(fiber * self.guidelines.fiber_boost)

        targets = NutrientTargets(
            calories=tdee,
            protein_g=round_half_up(tdee * ratio.protein / KCAL_PER_G_PROTEIN),
            carbs_g=round_half_up(tdee * ratio.carbs / KCAL_PER_G_CARBS),
            fat_g=round_half_up(tdee * ratio.fat / KCAL_PER_G_FAT),
            sugar_g=round_half_up(tdee * sugar_share / KCAL_PER_G_SUGAR),
            salt_mg=self.guidelines.salt_cap(profile),
            fiber_g=fiber,
        )
        if self.debug:
            _logger.info(
                "Targets computed: tdee=%s ratio=%s sugar_share=%s conditions=%s",
                tdee,
                ratio,
                sugar_share,
                sorted(tag.value for tag in profile.conditions),
            )
        return targets

    def total_energy(self, profile: Profile, today: date) -> int:
        """Return TDEE: BMR scaled by the activity multiplier, in whole kcal."""
        bmr = basal_metabolic_rate(profile, profile.age(today))
        return max(round_half_up(bmr * profile.activity_factor.value), 0)


def compute_targets(
    profile: Profile | None, today: date | None = None
) -> NutrientTargets:
    """Compute targets with the default guideline tables."""
    return TargetCalculator().compute(profile, today)
