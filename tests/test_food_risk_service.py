"""Tests for food safety verdicts."""

import pytest
from pydantic import ValidationError

from nutrition_engine.domain.conditions import ConditionTag
from nutrition_engine.domain.interactions import (
    INTERACTIONS,
    FoodInteraction,
    find_reason,
    normalize_food_name,
)
from nutrition_engine.domain.scan import DetectedFood
from nutrition_engine.services.food_risk import FoodRiskService, evaluate_food_risk


def test_white_rice_is_risky_for_diabetes() -> None:
    finding = evaluate_food_risk([{"food_name": "nasi_putih"}], ["diabetes"])

    assert not finding.is_safe
    assert len(finding.risks) == 1
    risk = finding.risks[0]
    assert risk.disease is ConditionTag.DIABETES
    assert risk.food == "nasi_putih"
    assert risk.reason


def test_no_conditions_is_safe() -> None:
    finding = evaluate_food_risk([{"food_name": "nasi_putih"}], [])

    assert finding.is_safe
    assert finding.risks == ()


def test_unknown_food_never_produces_risk() -> None:
    finding = evaluate_food_risk(
        [{"food_name": "mystery_stew"}, {"food_name": ""}],
        list(ConditionTag),
    )

    assert finding.is_safe


def test_malformed_conditions_fail_open() -> None:
    finding = evaluate_food_risk([{"food_name": "nasi_putih"}], "[diabetes")

    assert finding.is_safe


def test_risks_follow_item_then_condition_order() -> None:
    items = [
        DetectedFood(food_name="ayam_goreng", calories=260),
        DetectedFood(food_name="nasi_putih", calories=180),
        DetectedFood(food_name="sambal"),
    ]
    conditions = '["Jantung", "Maag/GERD", "Kolesterol", "Diabetes"]'

    finding = FoodRiskService().evaluate(items, conditions)

    assert [(risk.food, risk.disease) for risk in finding.risks] == [
        ("ayam_goreng", ConditionTag.HIGH_CHOLESTEROL),
        ("ayam_goreng", ConditionTag.REFLUX),
        ("ayam_goreng", ConditionTag.HEART),
        ("nasi_putih", ConditionTag.DIABETES),
        ("sambal", ConditionTag.REFLUX),
    ]


def test_one_risk_per_item_and_condition() -> None:
    # Matches both the red meat and coconut milk categories.
    finding = evaluate_food_risk([{"food_name": "rendang"}], ["high-cholesterol"])

    assert len(finding.risks) == 1
    assert finding.risks[0].reason == "red meat is high in saturated fat"


def test_evaluation_is_deterministic() -> None:
    items = [{"food_name": "mie_instan"}, {"food_name": "udang_goreng"}]
    conditions = ["gout", "hypertension", "kidney", "diabetes"]

    first = evaluate_food_risk(items, conditions)
    second = evaluate_food_risk(items, conditions)

    assert first == second
    assert len(first.risks) == 4


def test_custom_table() -> None:
    table = (
        FoodInteraction(
            category="citrus",
            keywords=("grapefruit",),
            reasons={ConditionTag.HEART: "interacts with statins"},
        ),
    )
    service = FoodRiskService(table=table)

    finding = service.evaluate([{"food_name": "Grapefruit"}], ["heart"])

    assert finding.risks[0].reason == "interacts with statins"
    assert service.evaluate([{"food_name": "nasi"}], ["diabetes"]).is_safe


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Nasi_Putih", "nasi putih"),
        ("  ayam-goreng  crispy ", "ayam goreng crispy"),
    ],
)
def test_normalize_food_name(name: str, expected: str) -> None:
    assert normalize_food_name(name) == expected


def test_keywords_match_whole_words_only() -> None:
    # "hati" must not match inside another word.
    assert find_reason("sayur_hatinya", ConditionTag.GOUT) is None
    assert find_reason("hati_ayam", ConditionTag.GOUT) is not None


def test_every_table_entry_has_keywords_and_reasons() -> None:
    for interaction in INTERACTIONS:
        assert interaction.keywords
        assert interaction.reasons
        assert all(reason for reason in interaction.reasons.values())


def test_review_scan_sums_items_and_defaults_missing_fields() -> None:
    items = [
        {"food_name": "nasi_putih", "calories": 180, "carbs_g": 40, "protein_g": 3},
        {"food_name": "tempe", "calories": 150, "protein_g": 12, "salt_mg": None},
    ]

    review = FoodRiskService().review_scan(items, ["diabetes"])

    assert review.total.calories == 330
    assert review.total.protein_g == 15
    assert review.total.carbs_g == 40
    assert review.total.salt_mg == 0
    assert review.total.fiber_g == 0
    assert [item.food_name for item in review.items] == ["nasi_putih", "tempe"]
    assert not review.finding.is_safe


def test_evaluate_reads_only_food_names() -> None:
    items = [
        {"food_name": "nasi_putih", "calories": -5},
        {"food_name": "mie_goreng", "calories": "n/a"},
        {"food_name": None},
        {"calories": 120},
    ]

    finding = evaluate_food_risk(items, ["diabetes"])

    assert [risk.food for risk in finding.risks] == ["nasi_putih", "mie_goreng"]


def test_review_scan_still_validates_nutrients() -> None:
    with pytest.raises(ValidationError):
        FoodRiskService().review_scan(
            [{"food_name": "nasi_putih", "calories": -5}], ["diabetes"]
        )
