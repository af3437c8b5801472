"""Daily journal summaries."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from nutrition_engine.domain.conditions import normalize_conditions
from nutrition_engine.domain.guidelines import FALLBACK_TARGETS
from nutrition_engine.domain.nutrition import (
    Nutrient,
    NutrientIntake,
    NutrientTargets,
    sum_intake,
)
from nutrition_engine.domain.status import NutrientStatus
from nutrition_engine.services.classifier import StatusClassifier

# Row order of the journal table.
JOURNAL_NUTRIENTS: tuple[Nutrient, ...] = (
    Nutrient.PROTEIN,
    Nutrient.CARBS,
    Nutrient.FAT,
    Nutrient.SUGAR,
    Nutrient.SALT,
    Nutrient.FIBER,
)


@dataclass(frozen=True)
class JournalRow:
    """One nutrient line of the daily journal."""

    actual: float
    target: int
    status: NutrientStatus


@dataclass(frozen=True)
class DailyReport:
    """Daily intake against targets."""

    rows: tuple[JournalRow, ...]
    calories_consumed: float
    calorie_target: int
    calorie_progress_pct: float


@dataclass
class JournalService:
    """Aggregates logged foods and labels the day's intake."""

    classifier: StatusClassifier

    def daily_totals(
        self, entries: Iterable[NutrientIntake | Mapping[str, object]]
    ) -> NutrientIntake:
        """Sum the day's logged foods."""
        return sum_intake(entries)

    def daily_report(
        self,
        intake: NutrientIntake,
        targets: NutrientTargets,
        conditions: object = None,
    ) -> DailyReport:
        """Classify every journal nutrient and compute calorie progress."""
        tags = normalize_conditions(conditions)
        rows = []
        for nutrient in JOURNAL_NUTRIENTS:
            actual = intake.value_for(nutrient)
            target = targets.value_for(nutrient)
            status = self.classifier.classify(
                nutrient, actual, target, conditions=tags
            )
            rows.append(JournalRow(actual=actual, target=target, status=status))
        return DailyReport(
            rows=tuple(rows),
            calories_consumed=intake.calories,
            calorie_target=targets.calories,
            calorie_progress_pct=calorie_progress(intake.calories, targets.calories),
        )


def calorie_progress(consumed: float, target: int) -> float:
    """Percentage of the calorie target eaten, capped at 100."""
    resolved_target = target or FALLBACK_TARGETS.calories
    return min(consumed / resolved_target * 100, 100.0)
