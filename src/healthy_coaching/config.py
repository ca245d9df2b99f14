"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from healthy_coaching.domain.summary import AlertThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

SUPPORTED_LANGUAGES = ("id", "en")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    environment: str = _ENVIRONMENT
    default_timezone: str = "Asia/Jakarta"
    default_language: str = "id"
    default_calorie_target: float = 2000.0
    catalog_cache_ttl_seconds: int = 3600
    recommendation_limit: int = 10
    sodium_limit_mg: float = 5000.0
    sugar_limit_g: float = 50.0
    fiber_min_g: float = 25.0
    calorie_low_percent: float = 80.0
    calorie_high_percent: float = 120.0

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def alert_thresholds(self) -> AlertThresholds:
        """Build classifier thresholds from settings."""
        return AlertThresholds(
            sodium_limit_mg=self.sodium_limit_mg,
            sugar_limit_g=self.sugar_limit_g,
            fiber_min_g=self.fiber_min_g,
            calorie_low_percent=self.calorie_low_percent,
            calorie_high_percent=self.calorie_high_percent,
        )


def parse_language(raw: str | None, default: str = "id") -> str:
    """Normalize a language tag such as ``en-US`` or ``id_ID``."""
    if raw is None:
        return default
    cleaned = raw.strip().lower()
    if not cleaned:
        return default
    for chunk in cleaned.split(","):
        primary = chunk.split(";")[0].strip().replace("_", "-").split("-")[0]
        if primary in SUPPORTED_LANGUAGES:
            return primary
    return default
