"""Food and medical condition interaction table.

Foods are matched by keyword on their normalized name (lowercase, with
underscores and hyphens as spaces). A keyword matches when it equals the
name or appears in it as a whole-word phrase, so ``nasi_putih`` and
``nasi goreng`` both hit the ``nasi`` keyword. Foods with no matching entry
carry no risk.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from nutrition_engine.domain.conditions import ConditionTag


@dataclass(frozen=True)
class FoodInteraction:
    """A food category and the conditions it is contraindicated for."""

    category: str
    keywords: tuple[str, ...]
    reasons: Mapping[ConditionTag, str]

    def matches(self, food_name: str) -> bool:
        """Return True when a normalized ``food_name`` hits any keyword."""
        padded = f" {food_name} "
        return any(f" {keyword} " in padded for keyword in self.keywords)


def normalize_food_name(name: str) -> str:
    """Lowercase a food label and turn separators into single spaces."""
    return " ".join(name.replace("_", " ").replace("-", " ").lower().split())


INTERACTIONS: tuple[FoodInteraction, ...] = (
    FoodInteraction(
        category="refined_carbohydrate",
        keywords=(
            "nasi", "rice", "bubur", "porridge", "lontong", "ketupat",
            "roti tawar", "white bread", "mie", "noodle", "noodles", "pasta",
        ),
        reasons={
            ConditionTag.DIABETES: "high glycemic index, raises blood sugar quickly",
        },
    ),
    FoodInteraction(
        category="added_sugar",
        keywords=(
            "manis", "gula", "sugar", "soda", "cola", "sirup", "syrup", "kue",
            "cake", "donat", "donut", "es krim", "ice cream", "cokelat",
            "chocolate", "permen", "candy", "boba", "bubble tea",
        ),
        reasons={
            ConditionTag.DIABETES: "high in added sugar",
        },
    ),
    FoodInteraction(
        category="salted_or_processed",
        keywords=(
            "mie instan", "instant noodle", "instant noodles", "ramen",
            "ikan asin", "salted fish", "telur asin", "salted egg", "kerupuk",
            "sosis", "sausage", "kornet", "corned beef", "nugget", "bacon",
            "ham", "bakso", "kecap", "soy sauce",
        ),
        reasons={
            ConditionTag.HYPERTENSION: "high sodium raises blood pressure",
            ConditionTag.KIDNEY: "high sodium load burdens the kidneys",
            ConditionTag.HEART: "high sodium strains the heart",
        },
    ),
    FoodInteraction(
        category="deep_fried",
        keywords=(
            "goreng", "gorengan", "fried", "fries", "crispy", "keripik",
            "chips",
        ),
        reasons={
            ConditionTag.HIGH_CHOLESTEROL: "deep-fried, high in saturated fat",
            ConditionTag.REFLUX: "greasy fried food triggers acid reflux",
            ConditionTag.HEART: "fried fat raises cardiovascular risk",
        },
    ),
    FoodInteraction(
        category="organ_meat",
        keywords=(
            "jeroan", "offal", "hati", "liver", "ampela", "gizzard", "usus",
            "babat", "tripe", "otak", "brain",
        ),
        reasons={
            ConditionTag.GOUT: "very high purine content raises uric acid",
            ConditionTag.HIGH_CHOLESTEROL: "very high in dietary cholesterol",
            ConditionTag.HEART: "very high in dietary cholesterol",
        },
    ),
    FoodInteraction(
        category="shellfish",
        keywords=(
            "udang", "shrimp", "prawn", "kerang", "clam", "clams", "cumi",
            "squid", "kepiting", "crab",
        ),
        reasons={
            ConditionTag.GOUT: "high purine content raises uric acid",
            ConditionTag.HIGH_CHOLESTEROL: "high in dietary cholesterol",
        },
    ),
    FoodInteraction(
        category="purine_rich",
        keywords=(
            "sarden", "sardine", "sardines", "teri", "anchovy", "emping",
            "melinjo", "kacang merah",
        ),
        reasons={
            ConditionTag.GOUT: "high purine content raises uric acid",
        },
    ),
    FoodInteraction(
        category="red_meat",
        keywords=(
            "daging", "beef", "sapi", "kambing", "mutton", "lamb", "steak",
            "iga", "ribs", "rendang", "burger",
        ),
        reasons={
            ConditionTag.GOUT: "red meat is high in purines",
            ConditionTag.HIGH_CHOLESTEROL: "red meat is high in saturated fat",
            ConditionTag.HEART: "red meat is high in saturated fat",
        },
    ),
    FoodInteraction(
        category="coconut_milk",
        keywords=(
            "santan", "coconut milk", "gulai", "opor", "lodeh", "kari",
            "curry",
        ),
        reasons={
            ConditionTag.HIGH_CHOLESTEROL: "coconut milk is rich in saturated fat",
            ConditionTag.REFLUX: "rich fatty gravy triggers acid reflux",
        },
    ),
    FoodInteraction(
        category="egg_yolk",
        keywords=("kuning telur", "egg yolk", "telur puyuh", "quail egg"),
        reasons={
            ConditionTag.HIGH_CHOLESTEROL: "egg yolk is high in dietary cholesterol",
        },
    ),
    FoodInteraction(
        category="spicy_or_acidic",
        keywords=(
            "sambal", "pedas", "spicy", "chili", "cabai", "kopi", "coffee",
            "jeruk", "orange", "lemon", "cuka", "vinegar",
        ),
        reasons={
            ConditionTag.REFLUX: "spicy or acidic, irritates the stomach lining",
        },
    ),
    FoodInteraction(
        category="high_potassium",
        keywords=(
            "pisang", "banana", "kentang", "potato", "alpukat", "avocado",
            "bayam", "spinach", "tomat", "tomato",
        ),
        reasons={
            ConditionTag.KIDNEY: "high potassium is hard for weakened kidneys to clear",
        },
    ),
)


def find_reason(
    food_name: str,
    condition: ConditionTag,
    table: tuple[FoodInteraction, ...] = INTERACTIONS,
) -> str | None:
    """Return why ``food_name`` is risky for ``condition``, or None.

    Table order decides which reason is reported when several categories
    match the same food.
    """
    normalized = normalize_food_name(food_name)
    if not normalized:
        return None
    for interaction in table:
        reason = interaction.reasons.get(condition)
        if reason and interaction.matches(normalized):
            return reason
    return None
