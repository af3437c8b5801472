"""Nutrient targets and observed intake."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


class Nutrient(str, Enum):
    """Nutrients tracked against a daily target."""

    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"
    SUGAR = "sugar"
    SALT = "salt"
    FIBER = "fiber"

    @property
    def unit(self) -> str:
        """Unit the nutrient is measured in."""
        return "mg" if self is Nutrient.SALT else "g"

    @property
    def field_name(self) -> str:
        """Attribute name on targets and intake, e.g. ``salt_mg``."""
        return f"{self.value}_{self.unit}"

    @property
    def is_upper_bound(self) -> bool:
        """True when the target is a ceiling rather than a floor."""
        return self in UPPER_BOUND_NUTRIENTS


UPPER_BOUND_NUTRIENTS = frozenset({Nutrient.SUGAR, Nutrient.SALT})


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class NutrientTargets:
    """Personalized daily targets."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    sugar_g: int
    salt_mg: int
    fiber_g: int

    def value_for(self, nutrient: Nutrient) -> int:
        """Return the target for ``nutrient``."""
        return getattr(self, nutrient.field_name)

    @property
    def macro_calories(self) -> int:
        """Energy implied by the macro grams (4/4/9 kcal per gram)."""
        return self.protein_g * 4 + self.carbs_g * 4 + self.fat_g * 9


@dataclass(frozen=True)
class NutrientIntake:
    """Observed nutrients for a day or a single detected food."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    sugar_g: float = 0.0
    salt_mg: float = 0.0
    fiber_g: float = 0.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "NutrientIntake":
        """Build intake from a logged-food payload; missing or null fields are 0."""
        values: dict[str, float] = {}
        for item in fields(cls):
            raw = data.get(item.name)
            values[item.name] = float(raw) if raw is not None else 0.0
        return cls(**values)

    def value_for(self, nutrient: Nutrient) -> float:
        """Return the observed amount of ``nutrient``."""
        return getattr(self, nutrient.field_name)

    def __add__(self, other: "NutrientIntake") -> "NutrientIntake":
        return NutrientIntake(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            sugar_g=self.sugar_g + other.sugar_g,
            salt_mg=self.salt_mg + other.salt_mg,
            fiber_g=self.fiber_g + other.fiber_g,
        )


def sum_intake(
    entries: Iterable[NutrientIntake | Mapping[str, object]],
) -> NutrientIntake:
    """Sum logged foods into a single intake."""
    total = NutrientIntake()
    for entry in entries:
        if not isinstance(entry, NutrientIntake):
            entry = NutrientIntake.from_mapping(entry)
        total = total + entry
    return total
