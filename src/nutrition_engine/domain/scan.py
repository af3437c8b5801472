"""Models for food items returned by the image recognition service."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nutrition_engine.domain.nutrition import NutrientIntake
from nutrition_engine.domain.status import RiskFinding


class DetectedFood(BaseModel):
    """Single food item detected in a scanned image."""

    model_config = ConfigDict(extra="ignore")

    food_name: str
    calories: float = Field(default=0.0, ge=0.0)
    protein_g: float = Field(default=0.0, ge=0.0)
    carbs_g: float = Field(default=0.0, ge=0.0)
    fat_g: float = Field(default=0.0, ge=0.0)
    sugar_g: float = Field(default=0.0, ge=0.0)
    salt_mg: float = Field(default=0.0, ge=0.0)
    fiber_g: float = Field(default=0.0, ge=0.0)

    @field_validator(
        "calories",
        "protein_g",
        "carbs_g",
        "fat_g",
        "sugar_g",
        "salt_mg",
        "fiber_g",
        mode="before",
    )
    @classmethod
    def _null_as_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    def intake(self) -> NutrientIntake:
        """Return this item's nutrients as an intake value."""
        return NutrientIntake(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            sugar_g=self.sugar_g,
            salt_mg=self.salt_mg,
            fiber_g=self.fiber_g,
        )


@dataclass(frozen=True)
class ScanReview:
    """Combined nutrients and safety verdict for one scan."""

    items: tuple[DetectedFood, ...]
    total: NutrientIntake
    finding: RiskFinding
