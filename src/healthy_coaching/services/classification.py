"""Status and alert classification of daily totals."""

from healthy_coaching.domain.foods import NutritionProfile
from healthy_coaching.domain.summary import (
    DEFAULT_THRESHOLDS,
    AlertCode,
    AlertThresholds,
    Classification,
    NutritionStatus,
)
from healthy_coaching.errors import InvalidTargetError


def classify(
    totals: NutritionProfile,
    target_calories: float,
    thresholds: AlertThresholds = DEFAULT_THRESHOLDS,
) -> Classification:
    """Compare daily totals with the calorie target and health limits."""
    if target_calories <= 0:
        raise InvalidTargetError(target_calories)
    percent = totals.calories / target_calories * 100
    status = calorie_status(percent, thresholds)

    alerts: list[AlertCode] = []
    if totals.sodium_mg > thresholds.sodium_limit_mg:
        alerts.append(AlertCode.SALT_EXCESS)
    if totals.sugar_g > thresholds.sugar_limit_g:
        alerts.append(AlertCode.SUGAR_EXCESS)
    if totals.fiber_g < thresholds.fiber_min_g:
        alerts.append(AlertCode.FIBER_LOW)
    if status == NutritionStatus.BELOW:
        alerts.append(AlertCode.CALORIE_LOW)
    if status == NutritionStatus.ABOVE:
        alerts.append(AlertCode.CALORIE_HIGH)

    return Classification(
        status=status, alerts=tuple(alerts), percent_of_target=percent
    )


def calorie_status(
    percent_of_target: float, thresholds: AlertThresholds = DEFAULT_THRESHOLDS
) -> NutritionStatus:
    """Map a percent of target onto below / on target / above."""
    if percent_of_target < thresholds.calorie_low_percent:
        return NutritionStatus.BELOW
    if percent_of_target <= thresholds.calorie_high_percent:
        return NutritionStatus.ON_TARGET
    return NutritionStatus.ABOVE
