"""Per-nutrient status classification."""

from dataclasses import dataclass, field

from nutrition_engine.domain.conditions import (
    NO_CONDITIONS,
    ConditionTag,
    normalize_conditions,
)
from nutrition_engine.domain.nutrition import Nutrient
from nutrition_engine.domain.status import (
    DANGER_CONDITIONS,
    NutrientStatus,
    StatusLabel,
    StatusThresholds,
)


def percent_of_target(actual: float, target: float) -> float:
    """Return ``actual`` as a percent of ``target``; a zero target counts as 1."""
    return actual / (target or 1) * 100


def _resolve_nutrient(value: Nutrient | str) -> Nutrient:
    if isinstance(value, Nutrient):
        return value
    return Nutrient(value.strip().lower())


@dataclass
class StatusClassifier:
    """Compares one nutrient's intake against its target."""

    thresholds: StatusThresholds = field(default_factory=StatusThresholds)
    danger_conditions: dict[Nutrient, ConditionTag] = field(
        default_factory=lambda: dict(DANGER_CONDITIONS)
    )

    def classify(
        self,
        nutrient: Nutrient,
        actual: float,
        target: float,
        *,
        upper_bound: bool | None = None,
        conditions: object = NO_CONDITIONS,
    ) -> NutrientStatus:
        """Label intake of ``nutrient`` against ``target``.

        Condition-specific danger checks run first and ignore the bound
        direction. ``upper_bound`` defaults to the nutrient's own kind
        (sugar and salt are ceilings, the rest are floors).
        """
        nutrient = _resolve_nutrient(nutrient)
        pct = percent_of_target(actual, target)
        danger_condition = self.danger_conditions.get(nutrient)
        if (
            danger_condition is not None
            and danger_condition in normalize_conditions(conditions)
            and pct > self.thresholds.danger_pct
        ):
            return NutrientStatus(
                nutrient, StatusLabel.DANGER, pct, condition=danger_condition
            )

        if upper_bound is None:
            upper_bound = nutrient.is_upper_bound
        if upper_bound:
            return NutrientStatus(nutrient, self._ceiling_label(pct), pct)
        return NutrientStatus(nutrient, self._floor_label(pct), pct)

    def _ceiling_label(self, pct: float) -> StatusLabel:
        if pct > self.thresholds.excess_pct:
            return StatusLabel.EXCESS
        if pct > self.thresholds.warning_pct:
            return StatusLabel.WARNING
        return StatusLabel.SAFE

    def _floor_label(self, pct: float) -> StatusLabel:
        if pct < self.thresholds.low_pct:
            return StatusLabel.LOW
        if pct < self.thresholds.adequate_pct:
            return StatusLabel.ADEQUATE
        return StatusLabel.OPTIMAL


def classify(
    nutrient: Nutrient,
    actual: float,
    target: float,
    *,
    upper_bound: bool | None = None,
    conditions: object = NO_CONDITIONS,
) -> NutrientStatus:
    """Classify with the default thresholds."""
    return StatusClassifier().classify(
        nutrient, actual, target, upper_bound=upper_bound, conditions=conditions
    )
