"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from healthy_coaching.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from healthy_coaching.adapters.supabase_food_repository import SupabaseFoodRepository
from healthy_coaching.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from healthy_coaching.config import Settings
from healthy_coaching.errors import ConfigurationError
from healthy_coaching.services.cache import InMemoryCache
from healthy_coaching.services.catalog import CatalogService
from healthy_coaching.services.daily_summary import DailySummaryService
from healthy_coaching.services.food_logs import FoodLogService
from healthy_coaching.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    food_log_service: FoodLogService
    profile_service: ProfileService
    daily_summary_service: DailySummaryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    for key in ("supabase_url", "supabase_service_key"):
        if not getattr(resolved_settings, key):
            raise ConfigurationError(f"{key} must be set", config_key=key)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_service = CatalogService(
        repository=SupabaseFoodRepository(supabase_client),
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.catalog_cache_ttl_seconds,
    )
    food_log_service = FoodLogService(
        repository=SupabaseFoodLogRepository(supabase_client),
        catalog=catalog_service,
    )
    profile_service = ProfileService(
        repository=SupabaseProfileRepository(supabase_client),
        default_calorie_target=resolved_settings.default_calorie_target,
        default_timezone=resolved_settings.default_timezone,
        default_language=resolved_settings.default_language,
    )
    daily_summary_service = DailySummaryService(
        food_log_service=food_log_service,
        catalog=catalog_service,
        profile_service=profile_service,
        thresholds=resolved_settings.alert_thresholds(),
        recommendation_limit=resolved_settings.recommendation_limit,
    )

    async def close_resources() -> None:
        catalog_service.invalidate()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        food_log_service=food_log_service,
        profile_service=profile_service,
        daily_summary_service=daily_summary_service,
        close_resources=close_resources,
    )
