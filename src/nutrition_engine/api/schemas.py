"""Pydantic models for the HTTP adapter."""

from dataclasses import asdict
from datetime import date
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from nutrition_engine.domain.conditions import ConditionTag
from nutrition_engine.domain.hydration import HydrationLevel, HydrationStatus
from nutrition_engine.domain.nutrition import Nutrient, NutrientIntake, NutrientTargets
from nutrition_engine.domain.profile import Profile, Sex
from nutrition_engine.domain.scan import DetectedFood, ScanReview
from nutrition_engine.domain.status import NutrientStatus, RiskFinding, StatusLabel
from nutrition_engine.services.journal import DailyReport


class ProfilePayload(BaseModel):
    """Profile as stored by the profile service."""

    sex: Sex = Field(validation_alias=AliasChoices("sex", "gender"))
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    date_of_birth: date
    activity_factor: float | str = Field(
        default=1.2,
        validation_alias=AliasChoices("activity_factor", "activity_level"),
    )
    conditions: Any = Field(
        default=None,
        validation_alias=AliasChoices("conditions", "medical_conditions"),
    )

    @field_validator("sex", mode="before")
    @classmethod
    def _lower_sex(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    def to_profile(self) -> Profile:
        """Convert to the domain profile."""
        return Profile(
            sex=self.sex,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            date_of_birth=self.date_of_birth,
            activity_factor=self.activity_factor,
            conditions=self.conditions,
        )


class IntakePayload(BaseModel):
    """Logged food or daily total; missing nutrients count as zero."""

    calories: float | None = Field(default=None, ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)
    sugar_g: float | None = Field(default=None, ge=0)
    salt_mg: float | None = Field(default=None, ge=0)
    fiber_g: float | None = Field(default=None, ge=0)

    def to_intake(self) -> NutrientIntake:
        return NutrientIntake.from_mapping(self.model_dump())


class TargetsRequest(BaseModel):
    """Request for daily targets; no profile yields the fallback set."""

    profile: ProfilePayload | None = None
    today: date | None = None


class TargetsResponse(BaseModel):
    """Daily targets."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    sugar_g: int
    salt_mg: int
    fiber_g: int

    @classmethod
    def from_domain(cls, targets: NutrientTargets) -> "TargetsResponse":
        return cls(**asdict(targets))


class StatusRequest(BaseModel):
    """Single nutrient classification request."""

    nutrient: Nutrient
    actual: float = Field(ge=0)
    target: float = Field(ge=0)
    upper_bound: bool | None = None
    conditions: Any = None

    @field_validator("nutrient", mode="before")
    @classmethod
    def _lower_nutrient(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


class StatusResponse(BaseModel):
    """Status label for one nutrient."""

    nutrient: Nutrient
    status: StatusLabel
    pct: float
    condition: ConditionTag | None = None

    @classmethod
    def from_domain(cls, status: NutrientStatus) -> "StatusResponse":
        return cls(
            nutrient=status.nutrient,
            status=status.status,
            pct=status.pct,
            condition=status.condition,
        )


class JournalReportRequest(BaseModel):
    """Logged foods for one day plus the owner's profile."""

    entries: list[IntakePayload] = Field(default_factory=list)
    profile: ProfilePayload | None = None
    today: date | None = None


class JournalRowResponse(StatusResponse):
    """Journal table row."""

    actual: float
    target: int
    unit: str


class DailyReportResponse(BaseModel):
    """Daily report with per-nutrient rows and calorie progress."""

    targets: TargetsResponse
    rows: list[JournalRowResponse]
    calories_consumed: float
    calorie_target: int
    calorie_progress_pct: float

    @classmethod
    def from_domain(
        cls, report: DailyReport, targets: NutrientTargets
    ) -> "DailyReportResponse":
        rows = [
            JournalRowResponse(
                nutrient=row.status.nutrient,
                status=row.status.status,
                pct=row.status.pct,
                condition=row.status.condition,
                actual=row.actual,
                target=row.target,
                unit=row.status.nutrient.unit,
            )
            for row in report.rows
        ]
        return cls(
            targets=TargetsResponse.from_domain(targets),
            rows=rows,
            calories_consumed=report.calories_consumed,
            calorie_target=report.calorie_target,
            calorie_progress_pct=report.calorie_progress_pct,
        )


class FoodRiskRequest(BaseModel):
    """Detected items and the user's conditions."""

    items: list[DetectedFood]
    conditions: Any = None


class RiskPayload(BaseModel):
    """A single contraindication."""

    disease: ConditionTag
    food: str
    reason: str


class FoodRiskResponse(BaseModel):
    """Safety verdict for a scan."""

    is_safe: bool = Field(serialization_alias="isSafe")
    risks: list[RiskPayload]

    @classmethod
    def from_domain(cls, finding: RiskFinding) -> "FoodRiskResponse":
        return cls(
            is_safe=finding.is_safe,
            risks=[
                RiskPayload(disease=risk.disease, food=risk.food, reason=risk.reason)
                for risk in finding.risks
            ],
        )


class IntakeResponse(BaseModel):
    """Summed nutrients."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    sugar_g: float
    salt_mg: float
    fiber_g: float


class ScanReviewResponse(BaseModel):
    """Scan-review payload: items, totals and health risk."""

    detected_items: list[DetectedFood]
    total: IntakeResponse
    health_risk: FoodRiskResponse

    @classmethod
    def from_domain(cls, review: ScanReview) -> "ScanReviewResponse":
        return cls(
            detected_items=list(review.items),
            total=IntakeResponse(**asdict(review.total)),
            health_risk=FoodRiskResponse.from_domain(review.finding),
        )


class HydrationResponse(BaseModel):
    """Hydration level for the day."""

    glasses: int
    target_glasses: int
    level: HydrationLevel
    fill_pct: float

    @classmethod
    def from_domain(cls, status: HydrationStatus) -> "HydrationResponse":
        return cls(**asdict(status))
