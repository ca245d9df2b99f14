"""Food recommendations that correct nutrition alerts."""

from collections.abc import Callable, Iterable
from enum import StrEnum
from functools import partial
from typing import Protocol

from healthy_coaching.domain.foods import FoodItem
from healthy_coaching.domain.summary import AlertCode
from healthy_coaching.domain.users import UserConstraints
from healthy_coaching.services.eligibility import is_eligible

DEFAULT_LIMIT = 10


class SortDirection(StrEnum):
    """Sort order for nutrient queries."""

    ASC = "asc"
    DESC = "desc"


class FoodQuery(Protocol):
    """Catalog query interface used by the selector."""

    def query_foods_sorted_by_nutrient(
        self,
        nutrient: str,
        direction: SortDirection,
        eligible: Callable[[FoodItem], bool],
        limit: int,
    ) -> list[FoodItem]:
        """Return eligible foods ordered by a per-100g nutrient."""


RECOMMENDATION_RULES: dict[AlertCode, tuple[str, SortDirection]] = {
    AlertCode.FIBER_LOW: ("fiber_g", SortDirection.DESC),
    AlertCode.CALORIE_LOW: ("calories", SortDirection.DESC),
    AlertCode.CALORIE_HIGH: ("calories", SortDirection.ASC),
}


def recommend(
    alerts: Iterable[AlertCode],
    catalog: FoodQuery,
    constraints: UserConstraints,
    limit: int = DEFAULT_LIMIT,
) -> list[FoodItem]:
    """Return eligible foods addressing the alerts, first occurrence wins."""
    seen: set[str] = set()
    foods: list[FoodItem] = []
    for candidates in recommend_by_alert(alerts, catalog, constraints, limit).values():
        for food in candidates:
            if food.id in seen:
                continue
            seen.add(food.id)
            foods.append(food)
    return foods


def recommend_by_alert(
    alerts: Iterable[AlertCode],
    catalog: FoodQuery,
    constraints: UserConstraints,
    limit: int = DEFAULT_LIMIT,
) -> dict[AlertCode, list[FoodItem]]:
    """Return up to ``limit`` eligible foods for each actionable alert."""
    eligible = partial(_eligible_for, constraints)
    grouped: dict[AlertCode, list[FoodItem]] = {}
    for alert in alerts:
        rule = RECOMMENDATION_RULES.get(alert)
        if rule is None or alert in grouped:
            continue
        nutrient, direction = rule
        grouped[alert] = catalog.query_foods_sorted_by_nutrient(
            nutrient, direction, eligible, limit
        )
    return grouped


def _eligible_for(constraints: UserConstraints, food: FoodItem) -> bool:
    return is_eligible(food, constraints)
