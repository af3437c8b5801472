"""Tests for journal aggregation and daily reports."""

import pytest

from nutrition_engine.domain.conditions import ConditionTag
from nutrition_engine.domain.guidelines import FALLBACK_TARGETS
from nutrition_engine.domain.nutrition import Nutrient, NutrientIntake, sum_intake
from nutrition_engine.domain.status import StatusLabel
from nutrition_engine.services.classifier import StatusClassifier
from nutrition_engine.services.journal import (
    JOURNAL_NUTRIENTS,
    JournalService,
    calorie_progress,
)


@pytest.fixture
def service() -> JournalService:
    return JournalService(classifier=StatusClassifier())


def test_sum_intake_defaults_missing_micros(service: JournalService) -> None:
    entries = [
        {"calories": 400, "protein_g": 20, "carbs_g": 50, "fat_g": 10},
        {
            "calories": 250,
            "protein_g": 5,
            "carbs_g": 30,
            "fat_g": 12,
            "sugar_g": 18,
            "salt_mg": None,
            "fiber_g": 4,
        },
    ]

    total = service.daily_totals(entries)

    assert total == NutrientIntake(
        calories=650,
        protein_g=25,
        carbs_g=80,
        fat_g=22,
        sugar_g=18,
        salt_mg=0,
        fiber_g=4,
    )


def test_sum_intake_empty_day() -> None:
    assert sum_intake([]) == NutrientIntake()


def test_daily_report_rows_follow_journal_order(service: JournalService) -> None:
    intake = NutrientIntake(
        calories=1500,
        protein_g=30,
        carbs_g=150,
        fat_g=60,
        sugar_g=45,
        salt_mg=2500,
        fiber_g=25,
    )

    report = service.daily_report(intake, FALLBACK_TARGETS)

    assert [row.status.nutrient for row in report.rows] == list(JOURNAL_NUTRIENTS)
    labels = {row.status.nutrient: row.status.status for row in report.rows}
    assert labels == {
        Nutrient.PROTEIN: StatusLabel.LOW,
        Nutrient.CARBS: StatusLabel.ADEQUATE,
        Nutrient.FAT: StatusLabel.OPTIMAL,
        Nutrient.SUGAR: StatusLabel.WARNING,
        Nutrient.SALT: StatusLabel.EXCESS,
        Nutrient.FIBER: StatusLabel.OPTIMAL,
    }
    assert report.rows[0].actual == 30
    assert report.rows[0].target == 100
    assert report.calorie_progress_pct == pytest.approx(75)


def test_daily_report_applies_condition_danger(service: JournalService) -> None:
    intake = NutrientIntake(sugar_g=45, salt_mg=1900, fat_g=60)

    report = service.daily_report(
        intake, FALLBACK_TARGETS, '["Diabetes", "Hipertensi", "Kolesterol"]'
    )

    dangers = {
        row.status.nutrient: row.status.condition
        for row in report.rows
        if row.status.status is StatusLabel.DANGER
    }
    assert dangers == {
        Nutrient.FAT: ConditionTag.HIGH_CHOLESTEROL,
        Nutrient.SUGAR: ConditionTag.DIABETES,
        Nutrient.SALT: ConditionTag.HYPERTENSION,
    }


@pytest.mark.parametrize(
    ("consumed", "target", "expected"),
    [(1000, 2000, 50), (2600, 2000, 100), (500, 0, 25), (0, 1979, 0)],
)
def test_calorie_progress(consumed: float, target: int, expected: float) -> None:
    assert calorie_progress(consumed, target) == pytest.approx(expected)
