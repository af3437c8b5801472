"""Status labels and risk findings produced by the classifier."""

from dataclasses import dataclass, field
from enum import Enum

from nutrition_engine.domain.conditions import ConditionTag
from nutrition_engine.domain.nutrition import Nutrient


class StatusLabel(str, Enum):
    """Category of one nutrient's intake against its target."""

    DANGER = "danger"
    EXCESS = "excess"
    WARNING = "warning"
    SAFE = "safe"
    LOW = "low"
    ADEQUATE = "adequate"
    OPTIMAL = "optimal"


# Nutrient -> condition that turns a high reading into DANGER.
DANGER_CONDITIONS: dict[Nutrient, ConditionTag] = {
    Nutrient.SUGAR: ConditionTag.DIABETES,
    Nutrient.SALT: ConditionTag.HYPERTENSION,
    Nutrient.FAT: ConditionTag.HIGH_CHOLESTEROL,
}


@dataclass(frozen=True)
class StatusThresholds:
    """Percent-of-target cut-offs used by the classifier."""

    danger_pct: float = 80
    excess_pct: float = 100
    warning_pct: float = 80
    low_pct: float = 50
    adequate_pct: float = 80


@dataclass(frozen=True)
class NutrientStatus:
    """Classification result for one nutrient."""

    nutrient: Nutrient
    status: StatusLabel
    pct: float
    condition: ConditionTag | None = None


@dataclass(frozen=True)
class RiskEntry:
    """A detected food that is contraindicated for a condition."""

    disease: ConditionTag
    food: str
    reason: str


@dataclass(frozen=True)
class RiskFinding:
    """Safety verdict for one scan; safe exactly when there are no risks."""

    risks: tuple[RiskEntry, ...] = field(default_factory=tuple)

    @property
    def is_safe(self) -> bool:
        return not self.risks
