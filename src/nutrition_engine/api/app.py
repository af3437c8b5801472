"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Query, Request

from nutrition_engine.api.schemas import (
    DailyReportResponse,
    FoodRiskRequest,
    FoodRiskResponse,
    HydrationResponse,
    JournalReportRequest,
    ScanReviewResponse,
    StatusRequest,
    StatusResponse,
    TargetsRequest,
    TargetsResponse,
)
from nutrition_engine.app_logging import configure_logging
from nutrition_engine.containers import AppContainer
from nutrition_engine.domain.conditions import NO_CONDITIONS, normalize_conditions


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Engine")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/targets")
    async def targets(body: TargetsRequest, request: Request) -> TargetsResponse:
        """Return daily targets for a profile, or the fallback set."""
        state_container: AppContainer = request.app.state.container
        profile = body.profile.to_profile() if body.profile else None
        result = state_container.target_calculator.compute(profile, body.today)
        return TargetsResponse.from_domain(result)

    @app.post("/status")
    async def status(body: StatusRequest, request: Request) -> StatusResponse:
        """Classify one nutrient's intake against its target."""
        state_container: AppContainer = request.app.state.container
        result = state_container.status_classifier.classify(
            body.nutrient,
            body.actual,
            body.target,
            upper_bound=body.upper_bound,
            conditions=normalize_conditions(body.conditions),
        )
        return StatusResponse.from_domain(result)

    @app.post("/journal/report")
    async def journal_report(
        body: JournalReportRequest, request: Request
    ) -> DailyReportResponse:
        """Sum the day's logged foods and label each nutrient."""
        state_container: AppContainer = request.app.state.container
        profile = body.profile.to_profile() if body.profile else None
        daily_targets = state_container.target_calculator.compute(profile, body.today)
        intake = state_container.journal_service.daily_totals(
            entry.to_intake() for entry in body.entries
        )
        report = state_container.journal_service.daily_report(
            intake,
            daily_targets,
            profile.conditions if profile else NO_CONDITIONS,
        )
        return DailyReportResponse.from_domain(report, daily_targets)

    @app.post("/food-risk")
    async def food_risk(body: FoodRiskRequest, request: Request) -> FoodRiskResponse:
        """Return the safety verdict for detected foods."""
        state_container: AppContainer = request.app.state.container
        finding = state_container.food_risk_service.evaluate(
            body.items, normalize_conditions(body.conditions)
        )
        if not finding.is_safe:
            logger.info("Food risk flagged %s item(s)", len(finding.risks))
        return FoodRiskResponse.from_domain(finding)

    @app.post("/scan/review")
    async def scan_review(
        body: FoodRiskRequest, request: Request
    ) -> ScanReviewResponse:
        """Return totals and the safety verdict for one scan."""
        state_container: AppContainer = request.app.state.container
        review = state_container.food_risk_service.review_scan(
            body.items, normalize_conditions(body.conditions)
        )
        return ScanReviewResponse.from_domain(review)

    @app.get("/hydration")
    async def hydration(
        request: Request, glasses: int = Query(default=0, ge=0)
    ) -> HydrationResponse:
        """Return the hydration level for a glass count."""
        state_container: AppContainer = request.app.state.container
        return HydrationResponse.from_domain(
            state_container.hydration_service.status(glasses)
        )

    return app
