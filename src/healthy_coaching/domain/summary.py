"""Domain models for daily nutrition summaries."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from healthy_coaching.domain.foods import FoodItem, NutritionProfile


class NutritionStatus(StrEnum):
    """Calorie intake relative to the daily target."""

    BELOW = "below"
    ON_TARGET = "on_target"
    ABOVE = "above"


class AlertCode(StrEnum):
    """Machine-readable nutrition threshold signals."""

    SALT_EXCESS = "SALT_EXCESS"
    SUGAR_EXCESS = "SUGAR_EXCESS"
    FIBER_LOW = "FIBER_LOW"
    CALORIE_LOW = "CALORIE_LOW"
    CALORIE_HIGH = "CALORIE_HIGH"


@dataclass(frozen=True)
class AlertThresholds:
    """Daily limits used by the classifier."""

    sodium_limit_mg: float = 5000.0
    sugar_limit_g: float = 50.0
    fiber_min_g: float = 25.0
    calorie_low_percent: float = 80.0
    calorie_high_percent: float = 120.0


DEFAULT_THRESHOLDS = AlertThresholds()


@dataclass(frozen=True)
class Classification:
    """Status and alerts derived from daily totals."""

    status: NutritionStatus
    alerts: tuple[AlertCode, ...]
    percent_of_target: float


@dataclass(frozen=True)
class DailyNutritionSummary:
    """Total nutrition consumed by one user on one day."""

    day: date
    totals: NutritionProfile
    target_calories: float
    percent_of_target: float
    status: NutritionStatus
    alerts: tuple[AlertCode, ...]
    entry_count: int


@dataclass(frozen=True)
class DailyReport:
    """Daily summary with optional coaching output."""

    summary: DailyNutritionSummary
    recommendations: list[FoodItem]
    tips: list[str]
    target_next_day: float
    language: str = "id"
