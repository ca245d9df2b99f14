"""Daily nutrition summary and coaching report."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from healthy_coaching.app_logging import log_error
from healthy_coaching.correlation import generate_correlation_id
from healthy_coaching.domain.summary import (
    DEFAULT_THRESHOLDS,
    AlertThresholds,
    DailyNutritionSummary,
    DailyReport,
)
from healthy_coaching.errors import HealthyCoachingError
from healthy_coaching.localization import coaching_tips
from healthy_coaching.services.aggregation import aggregate
from healthy_coaching.services.catalog import CatalogService
from healthy_coaching.services.classification import classify
from healthy_coaching.services.food_logs import FoodLogService
from healthy_coaching.services.profiles import ProfileService, local_today
from healthy_coaching.services.recommendations import recommend

_logger = logging.getLogger(__name__)


@dataclass
class DailySummaryService:
    """Computes a user's daily summary fresh on every call."""

    food_log_service: FoodLogService
    catalog: CatalogService
    profile_service: ProfileService
    thresholds: AlertThresholds = DEFAULT_THRESHOLDS
    recommendation_limit: int = 10

    def get_summary(
        self, user_id: str, day: date, *, correlation_id: str | None = None
    ) -> DailyNutritionSummary:
        """Aggregate the day's log entries and classify the totals."""
        resolved_id = correlation_id or generate_correlation_id()
        try:
            profile = self.profile_service.find_profile(user_id)
            timezone_name = self.profile_service.timezone_for(profile)
            return self._summarize(user_id, day, timezone_name)
        except HealthyCoachingError as exc:
            exc.correlation_id = resolved_id
            log_error(_logger, exc)
            raise

    def build_report(
        self,
        user_id: str,
        day: date | None = None,
        *,
        include_recommendations: bool = True,
        correlation_id: str | None = None,
    ) -> DailyReport:
        """Return the summary with recommendations, tips and next-day target.

        Without a day, the current day in the user's timezone is reported.
        """
        resolved_id = correlation_id or generate_correlation_id()
        try:
            profile = self.profile_service.find_profile(user_id)
            timezone_name = self.profile_service.timezone_for(profile)
            resolved_day = day or local_today(timezone_name)
            summary = self._summarize(user_id, resolved_day, timezone_name)
            recommendations = []
            if include_recommendations:
                recommendations = recommend(
                    summary.alerts,
                    self.catalog,
                    self.profile_service.constraints_for(profile),
                    limit=self.recommendation_limit,
                )
            language = self.profile_service.language_for(profile)
            target_next_day = self.profile_service.get_daily_calorie_target(
                user_id, resolved_day + timedelta(days=1)
            )
        except HealthyCoachingError as exc:
            exc.correlation_id = resolved_id
            log_error(_logger, exc)
            raise
        return DailyReport(
            summary=summary,
            recommendations=recommendations,
            tips=coaching_tips(summary.status, summary.alerts, language),
            target_next_day=target_next_day,
            language=language,
        )

    def _summarize(
        self, user_id: str, day: date, timezone_name: str
    ) -> DailyNutritionSummary:
        entries = self.food_log_service.get_entries_for_user_and_date(
            user_id, day, timezone_name
        )
        totals = aggregate(entries, self.catalog)
        target = self.profile_service.get_daily_calorie_target(user_id, day)
        classification = classify(totals, target, self.thresholds)
        _logger.info(
            "Daily summary: user=%s day=%s entries=%s status=%s alerts=%s",
            user_id,
            day.isoformat(),
            len(entries),
            classification.status,
            ",".join(classification.alerts),
        )
        return DailyNutritionSummary(
            day=day,
            totals=totals,
            target_calories=target,
            percent_of_target=classification.percent_of_target,
            status=classification.status,
            alerts=classification.alerts,
            entry_count=len(entries),
        )
