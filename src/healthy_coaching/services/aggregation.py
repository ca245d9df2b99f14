"""Daily log aggregation."""

from collections.abc import Iterable
from typing import Protocol

from healthy_coaching.domain.foods import FoodItem, NutritionProfile
from healthy_coaching.domain.logs import LogEntry
from healthy_coaching.errors import UnknownFoodError
from healthy_coaching.services.portions import portion_weight, scale


class FoodLookup(Protocol):
    """Resolves food ids to catalog entries."""

    def get(self, food_id: str) -> FoodItem | None:
        """Return the food for an id, or None when absent."""


def aggregate(entries: Iterable[LogEntry], catalog: FoodLookup) -> NutritionProfile:
    """Sum the scaled nutrition of every log entry.

    An empty input yields an all-zero profile. The result does not depend on
    entry order.
    """
    totals = dict.fromkeys(NutritionProfile.nutrient_names(), 0.0)
    for entry in entries:
        portion = entry_nutrition(entry, catalog)
        for name, value in portion.as_dict().items():
            totals[name] += value
    return NutritionProfile(**totals)


def entry_nutrition(entry: LogEntry, catalog: FoodLookup) -> NutritionProfile:
    """Return the nutrition consumed by a single log entry."""
    food = catalog.get(entry.food_id)
    if food is None:
        raise UnknownFoodError(entry.food_id, entry_id=entry.id)
    weight = portion_weight(food, entry.portion_index, entry_id=entry.id)
    return scale(food.nutrition_per_100g, weight)
