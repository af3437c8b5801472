"""Safety verdicts for detected foods."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from nutrition_engine.domain.conditions import normalize_conditions, ordered
from nutrition_engine.domain.interactions import (
    INTERACTIONS,
    FoodInteraction,
    find_reason,
)
from nutrition_engine.domain.nutrition import sum_intake
from nutrition_engine.domain.scan import DetectedFood, ScanReview
from nutrition_engine.domain.status import RiskEntry, RiskFinding

_logger = logging.getLogger(__name__)

FoodItemInput = DetectedFood | Mapping[str, object]


@dataclass
class FoodRiskService:
    """Checks detected foods against the user's conditions."""

    table: tuple[FoodInteraction, ...] = INTERACTIONS
    debug: bool = False

    def evaluate(
        self, items: Iterable[FoodItemInput], conditions: object
    ) -> RiskFinding:
        """Return every contraindication for ``items``.

        Risks follow item order, then condition declaration order. Conditions
        may be any payload accepted by ``normalize_conditions``. Only the
        food name of each item is read; items without a string name are skipped.
        """
        tags = ordered(normalize_conditions(conditions))
        risks: list[RiskEntry] = []
        for food_name in _food_names(items):
            for condition in tags:
                reason = find_reason(food_name, condition, self.table)
                if reason is not None:
                    risks.append(
                        RiskEntry(disease=condition, food=food_name, reason=reason)
                    )
        if self.debug:
            _logger.info(
                "Food risk evaluated: conditions=%s risks=%s",
                [tag.value for tag in tags],
                len(risks),
            )
        return RiskFinding(risks=tuple(risks))

    def review_scan(
        self, items: Iterable[FoodItemInput], conditions: object
    ) -> ScanReview:
        """Return summed nutrients and the safety verdict for one scan."""
        detected = _as_detected(items)
        return ScanReview(
            items=detected,
            total=sum_intake(item.intake() for item in detected),
            finding=self.evaluate(detected, conditions),
        )


def _as_detected(items: Iterable[FoodItemInput]) -> tuple[DetectedFood, ...]:
    return tuple(
        item if isinstance(item, DetectedFood) else DetectedFood.model_validate(item)
        for item in items
    )


def _food_names(items: Iterable[FoodItemInput]) -> list[str]:
    names = []
    for item in items:
        if isinstance(item, DetectedFood):
            name = item.food_name
        elif isinstance(item, Mapping):
            name = item.get("food_name")
        else:
            name = None
        if isinstance(name, str) and name.strip():
            names.append(name)
    return names


def evaluate_food_risk(
    items: Iterable[FoodItemInput], conditions: object
) -> RiskFinding:
    """Evaluate with the default interaction table."""
    return FoodRiskService().evaluate(items, conditions)
