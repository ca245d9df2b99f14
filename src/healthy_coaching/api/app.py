"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse

from healthy_coaching.api.admin import router as admin_router
from healthy_coaching.api.schemas import (
    CalorieTargetIn,
    EligibilityOut,
    FoodOut,
    LogEntryIn,
    LogEntryOut,
    LogEntryPatch,
    ProfileOut,
    ReportOut,
)
from healthy_coaching.app_logging import configure_logging, log_error
from healthy_coaching.config import parse_language
from healthy_coaching.containers import AppContainer
from healthy_coaching.correlation import generate_correlation_id
from healthy_coaching.errors import HealthyCoachingError, NotFoundError, ValidationError
from healthy_coaching.localization import render_error
from healthy_coaching.services.eligibility import (
    allergen_conflicts,
    is_eligible,
    is_nutrient_dense,
    is_ramadan_dish,
    nutrient_density_score,
)
from healthy_coaching.services.food_logs import UNCHANGED
from healthy_coaching.services.profiles import local_today

CORRELATION_HEADER = "X-Correlation-ID"


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.middleware("http")
    async def bind_correlation_id(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        request.state.correlation_id = correlation_id
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    @app.exception_handler(HealthyCoachingError)
    async def handle_app_error(
        request: Request, exc: HealthyCoachingError
    ) -> JSONResponse:
        correlation_id = getattr(request.state, "correlation_id", None)
        if correlation_id:
            exc.correlation_id = correlation_id
        log_error(logger, exc)
        payload = exc.to_dict()
        payload["message"] = render_error(exc, _request_language(request))
        return JSONResponse(status_code=_status_for(exc), content=payload)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/users/{user_id}/summary")
    async def daily_summary(
        user_id: str,
        request: Request,
        day: date | None = None,
        include_recommendations: bool = True,
    ) -> ReportOut:
        """Return the user's daily summary with coaching output."""
        state_container: AppContainer = request.app.state.container
        report = state_container.daily_summary_service.build_report(
            user_id,
            day,
            include_recommendations=include_recommendations,
            correlation_id=request.state.correlation_id,
        )
        language = _request_language(request, fallback=report.language)
        return ReportOut.from_report(report, language)

    @app.post("/users/{user_id}/logs", status_code=status.HTTP_201_CREATED)
    async def log_meal(
        user_id: str, payload: LogEntryIn, request: Request
    ) -> LogEntryOut:
        """Log a consumed food portion."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.food_log_service.log_meal(
            user_id,
            payload.food_id,
            payload.portion_index,
            consumed_at=payload.consumed_at,
            note=payload.note,
        )
        return LogEntryOut.from_entry(entry)

    @app.patch("/logs/{entry_id}")
    async def update_log(
        entry_id: str, payload: LogEntryPatch, request: Request
    ) -> LogEntryOut:
        """Edit the portion, time or note of a log entry."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.food_log_service.update_entry(
            entry_id,
            portion_index=payload.portion_index,
            consumed_at=payload.consumed_at,
            note=payload.note if "note" in payload.model_fields_set else UNCHANGED,
        )
        return LogEntryOut.from_entry(entry)

    @app.delete("/logs/{entry_id}")
    async def delete_log(entry_id: str, request: Request) -> Response:
        """Delete a log entry."""
        state_container: AppContainer = request.app.state.container
        state_container.food_log_service.delete_entry(entry_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.put("/users/{user_id}/calorie-target")
    async def set_calorie_target(
        user_id: str, payload: CalorieTargetIn, request: Request
    ) -> dict[str, object]:
        """Set the user's calorie target from a day onward."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.set_calorie_target(
            user_id, payload.day, payload.target_calories
        )
        return {
            "user_id": user_id,
            "day": payload.day.isoformat(),
            "target_calories": payload.target_calories,
        }

    @app.get("/users/{user_id}/profile")
    async def user_profile(user_id: str, request: Request) -> ProfileOut:
        """Return the user's profile with BMI."""
        state_container: AppContainer = request.app.state.container
        profile_service = state_container.profile_service
        profile = profile_service.get_profile(user_id)
        today = local_today(profile_service.timezone_for(profile))
        return ProfileOut.from_profile(profile, today)

    @app.get("/foods/search")
    async def search_foods(
        request: Request, q: str = "", limit: int = Query(10, ge=1, le=50)
    ) -> dict[str, list[FoodOut]]:
        """Search the catalog by name."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.catalog_service.search(q, limit=limit)
        return {"foods": [FoodOut.from_food(food) for food in foods]}

    @app.get("/foods/{food_id}")
    async def food_detail(food_id: str, request: Request) -> FoodOut:
        """Return a catalog food with per-portion nutrition."""
        state_container: AppContainer = request.app.state.container
        return FoodOut.from_food(state_container.catalog_service.require(food_id))

    @app.get("/foods/{food_id}/eligibility")
    async def food_eligibility(
        food_id: str, user_id: str, request: Request
    ) -> EligibilityOut:
        """Return whether a food suits a user's constraints."""
        state_container: AppContainer = request.app.state.container
        food = state_container.catalog_service.require(food_id)
        constraints = state_container.profile_service.get_constraints(user_id)
        return EligibilityOut(
            food_id=food.id,
            user_id=user_id,
            eligible=is_eligible(food, constraints),
            allergen_conflicts=sorted(
                allergen_conflicts(food, constraints.allergens)
            ),
            nutrient_density_score=round(nutrient_density_score(food), 2),
            is_nutrient_dense=is_nutrient_dense(food),
            is_ramadan_dish=is_ramadan_dish(food),
        )

    return app


def _status_for(error: HealthyCoachingError) -> int:
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _request_language(request: Request, fallback: str | None = None) -> str:
    container: AppContainer = request.app.state.container
    default = fallback or container.settings.default_language
    return parse_language(request.headers.get("Accept-Language"), default=default)

