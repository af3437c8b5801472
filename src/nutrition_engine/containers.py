"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_engine.config import Settings
from nutrition_engine.services.classifier import StatusClassifier
from nutrition_engine.services.food_risk import FoodRiskService
from nutrition_engine.services.hydration import HydrationService
from nutrition_engine.services.journal import JournalService
from nutrition_engine.services.targets import TargetCalculator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    target_calculator: TargetCalculator
    status_classifier: StatusClassifier
    journal_service: JournalService
    food_risk_service: FoodRiskService
    hydration_service: HydrationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    target_calculator = TargetCalculator(
        guidelines=resolved_settings.guidelines(),
        debug=resolved_settings.debug,
    )
    status_classifier = StatusClassifier()
    journal_service = JournalService(classifier=status_classifier)
    food_risk_service = FoodRiskService(debug=resolved_settings.debug)
    hydration_service = HydrationService(
        target_glasses=resolved_settings.water_target_glasses
    )
    return AppContainer(
        settings=resolved_settings,
        target_calculator=target_calculator,
        status_classifier=status_classifier,
        journal_service=journal_service,
        food_risk_service=food_risk_service,
        hydration_service=hydration_service,
    )
