"""FastAPI application factory."""

import logging
import math
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime
from uuid import UUID

from fastapi import FastAPI, Header, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from body_tracker.api.models import (
    BodyModel,
    DietTextModel,
    FoodCatalogModel,
    MetricsModel,
    MetricsRequest,
    MetricsResponse,
    ProgressRequest,
    ProgressResponse,
    SuggestionRequestModel,
)
from body_tracker.app_logging import configure_logging
from body_tracker.config import parse_allowed_origins
from body_tracker.containers import AppContainer
from body_tracker.domain.body import Gender
from body_tracker.domain.metrics import Measurement, MetricsResult
from body_tracker.services.body_scale import category_color, scale_factors
from body_tracker.services.metrics import (
    bmi_progress,
    compute_metrics,
    describe_calorie_balance,
    estimate_diet_calories,
)
from body_tracker.services.progress import FutureDateError
from body_tracker.services.suggestions import SuggestionError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SuggestionError)
    async def suggestion_error_handler(
        request: Request, exc: SuggestionError
    ) -> JSONResponse:
        logger.warning("Suggestion request failed on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, list[FoodCatalogModel]]:
        """Return the food catalog."""
        state_container: AppContainer = request.app.state.container
        catalog = state_container.catalog
        return {
            "foods": [
                FoodCatalogModel.from_domain(catalog[name]) for name in catalog.names()
            ]
        }

    @app.post("/metrics")
    async def metrics(payload: MetricsRequest, request: Request) -> MetricsResponse:
        """Compute BMI, calorie balance and body model parameters."""
        state_container: AppContainer = request.app.state.container
        result = compute_metrics(
            _measurement(payload),
            payload.meals.to_domain(),
            payload.workouts.to_domain(),
            state_container.catalog,
        )
        return _metrics_response(result, payload.gender)

    @app.post("/diet/estimate")
    async def estimate_diet(payload: DietTextModel) -> dict[str, float]:
        """Rough calorie estimate for meals described in free text."""
        return {
            "calories": estimate_diet_calories(
                payload.breakfast, payload.lunch, payload.dinner
            )
        }

    @app.post("/suggestions")
    async def suggestions(
        payload: SuggestionRequestModel, request: Request
    ) -> dict[str, str]:
        """Request coaching suggestions for the user's stats and routine."""
        state_container: AppContainer = request.app.state.container
        text = await state_container.suggestion_service.suggest(payload.to_domain())
        return {"suggestions": text}

    @app.get("/progress")
    async def list_progress(
        request: Request, x_user_id: UUID = Header()
    ) -> dict[str, list[date]]:
        """Return the days the user has tracked, most recent first."""
        state_container: AppContainer = request.app.state.container
        return {"dates": state_container.progress_service.list_dates(x_user_id)}

    @app.get("/progress/{day}")
    async def get_progress(
        day: date, request: Request, x_user_id: UUID = Header()
    ) -> ProgressResponse:
        """Return the stored snapshot for a day."""
        state_container: AppContainer = request.app.state.container
        progress = state_container.progress_service.get_day(x_user_id, day)
        if progress is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No progress recorded for {day.isoformat()}",
            )
        return ProgressResponse.from_domain(progress)

    @app.put("/progress/{day}")
    async def save_progress(
        day: date,
        payload: ProgressRequest,
        request: Request,
        x_user_id: UUID = Header(),
    ) -> ProgressResponse:
        """Compute and store the snapshot for a day."""
        state_container: AppContainer = request.app.state.container
        try:
            progress = state_container.progress_service.save_day(
                x_user_id, day, payload.to_domain(), today=datetime.now(tz=UTC).date()
            )
        except FutureDateError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return ProgressResponse.from_domain(progress)

    return app


def _measurement(payload: MetricsRequest) -> Measurement:
    return Measurement(height_cm=payload.height_cm, weight_kg=payload.weight_kg)


def _metrics_response(result: MetricsResult, gender: Gender) -> MetricsResponse:
    body = scale_factors(result.bmi, result.net_calories, gender)
    progress = bmi_progress(result.bmi)
    return MetricsResponse(
        metrics=MetricsModel.from_domain(result),
        body=BodyModel.from_domain(body, category_color(body.color_category)),
        bmi_progress=progress if math.isfinite(progress) else None,
        calorie_balance=describe_calorie_balance(result.net_calories),
    )
