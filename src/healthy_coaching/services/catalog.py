"""Food catalog service with injected caching."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from healthy_coaching.domain.foods import FoodCategory, FoodItem, NutritionProfile
from healthy_coaching.errors import NotFoundError, ValidationError
from healthy_coaching.services.aggregation import FoodLookup
from healthy_coaching.services.cache import Cache
from healthy_coaching.services.recommendations import FoodQuery, SortDirection

_ALL_FOODS_KEY = "catalog:all"
_FOOD_KEY_PREFIX = "catalog:food:"

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for catalog foods."""

    def get_food(self, food_id: str) -> FoodItem | None:
        """Return a food by id, if present."""

    def list_foods(self) -> list[FoodItem]:
        """Return every catalog food."""

    def upsert_food(self, food: FoodItem) -> FoodItem:
        """Insert or replace a food and return it."""


@dataclass
class CatalogService(FoodLookup, FoodQuery):
    """Catalog reads and queries backed by a repository and a cache."""

    repository: FoodRepository
    cache: Cache
    ttl_seconds: int = 3600

    def get(self, food_id: str) -> FoodItem | None:
        """Return a food by id, reading through the cache."""
        cache_key = f"{_FOOD_KEY_PREFIX}{food_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodItem):
            return cached
        food = self.repository.get_food(food_id)
        if food is not None:
            self.cache.set(cache_key, food, ttl_seconds=self.ttl_seconds)
        return food

    def require(self, food_id: str) -> FoodItem:
        """Return a food by id or raise ``NotFoundError``."""
        food = self.get(food_id)
        if food is None:
            raise NotFoundError("Food", food_id)
        return food

    def list_all(self) -> list[FoodItem]:
        """Return all foods, reading through the cache."""
        cached = self.cache.get(_ALL_FOODS_KEY)
        if isinstance(cached, list):
            return cached
        foods = self.repository.list_foods()
        self.cache.set(_ALL_FOODS_KEY, foods, ttl_seconds=self.ttl_seconds)
        return foods

    def query_foods_sorted_by_nutrient(
        self,
        nutrient: str,
        direction: SortDirection,
        eligible: Callable[[FoodItem], bool],
        limit: int,
    ) -> list[FoodItem]:
        """Return eligible foods sorted by a per-100g nutrient.

        Ties are broken by popularity, most popular first, then by id.
        """
        if nutrient not in NutritionProfile.nutrient_names():
            raise ValidationError(
                f"Unknown nutrient '{nutrient}'",
                validation_errors=["unknown_nutrient"],
            )
        if limit <= 0:
            return []
        sign = -1 if direction == SortDirection.DESC else 1
        candidates = [food for food in self.list_all() if eligible(food)]
        candidates.sort(
            key=lambda food: (
                sign * getattr(food.nutrition_per_100g, nutrient),
                -food.popularity,
                food.id,
            )
        )
        return candidates[:limit]

    def search(self, query: str, limit: int = 10) -> list[FoodItem]:
        """Search by name or alternate names, most popular first."""
        if limit <= 0:
            return []
        needle = query.strip().casefold()
        if not needle:
            return self._by_popularity(self.list_all())[:limit]
        matches = [
            food
            for food in self.list_all()
            if any(
                needle in name.casefold()
                for name in (food.name, *food.alternate_names)
            )
        ]
        return self._by_popularity(matches)[:limit]

    def list_by_category(self, category: FoodCategory) -> list[FoodItem]:
        """Return foods in a category, most popular first."""
        return self._by_popularity(
            [food for food in self.list_all() if food.category == category]
        )

    def upsert_food(self, food: FoodItem) -> FoodItem:
        """Persist an administrative update and invalidate cached reads."""
        saved = self.repository.upsert_food(food)
        self.cache.delete(f"{_FOOD_KEY_PREFIX}{food.id}")
        self.cache.delete(_ALL_FOODS_KEY)
        _logger.info("Catalog food upserted: food_id=%s", food.id)
        return saved

    def invalidate(self) -> None:
        """Drop every cached catalog read."""
        self.cache.delete(_ALL_FOODS_KEY)
        self.cache.delete_prefix(_FOOD_KEY_PREFIX)

    @staticmethod
    def _by_popularity(foods: list[FoodItem]) -> list[FoodItem]:
        return sorted(foods, key=lambda food: (-food.popularity, food.name))
