"""Supabase repository for the food catalog.

Nutrition, portions, allergens and regions are stored as JSON columns; they
are decoded into typed domain objects here and nowhere else.
"""

import json
from dataclasses import dataclass

from supabase import Client

from healthy_coaching.domain.foods import (
    CookingMethod,
    DietFlags,
    FoodCategory,
    FoodItem,
    NutritionProfile,
    Portion,
    RegionAvailability,
    RegionListing,
)
from healthy_coaching.errors import RepositoryError
from healthy_coaching.services.catalog import FoodRepository

_TABLE = "foods"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for catalog foods."""

    client: Client

    def get_food(self, food_id: str) -> FoodItem | None:
        """Return a food by id, if present."""
        response = (
            self.client.table(_TABLE).select("*").eq("id", food_id).limit(1).execute()
        )
        if not response.data:
            return None
        return food_from_row(response.data[0])

    def list_foods(self) -> list[FoodItem]:
        """Return all catalog foods."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .order("popularity", desc=True)
            .execute()
        )
        return [food_from_row(row) for row in response.data or []]

    def upsert_food(self, food: FoodItem) -> FoodItem:
        """Insert or replace a food row."""
        response = self.client.table(_TABLE).upsert(food_to_row(food)).execute()
        if not response.data:
            raise RepositoryError(
                "Failed to upsert food",
                repository=type(self).__name__,
                operation="upsert_food",
                entity_id=food.id,
            )
        return food_from_row(response.data[0])


def food_to_row(food: FoodItem) -> dict[str, object]:
    """Serialize a food into a table row."""
    availability = food.region_availability
    return {
        "id": food.id,
        "name": food.name,
        "alternate_names": json.dumps(list(food.alternate_names)),
        "category": food.category.value,
        "nutrition_per_100g": json.dumps(food.nutrition_per_100g.as_dict()),
        "standard_portions": json.dumps(
            [
                {
                    "label": portion.label,
                    "weight_g": portion.weight_g,
                    "description": portion.description,
                    "volume_ml": portion.volume_ml,
                }
                for portion in food.standard_portions
            ]
        ),
        "allergens": json.dumps(sorted(food.allergens)),
        "is_vegetarian": food.diet_flags.is_vegetarian,
        "is_vegan": food.diet_flags.is_vegan,
        "is_halal_certified": food.diet_flags.is_halal_certified,
        "region_availability": json.dumps(
            {
                "nationwide": availability.nationwide,
                "listings": [
                    {"province": listing.province, "city": listing.city}
                    for listing in sorted(
                        availability.listings,
                        key=lambda item: (item.province, item.city or ""),
                    )
                ],
            }
        ),
        "popularity": food.popularity,
        "cooking_methods": json.dumps(
            [method.value for method in food.cooking_methods]
        ),
        "origins": json.dumps(list(food.origins)),
    }


def food_from_row(row: dict[str, object]) -> FoodItem:
    """Parse a table row into a food."""
    nutrition = _load_json(row.get("nutrition_per_100g"), {})
    portions = _load_json(row.get("standard_portions"), [])
    region = _load_json(row.get("region_availability"), {"nationwide": True})
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        category=FoodCategory(str(row.get("category"))),
        nutrition_per_100g=NutritionProfile(
            **{
                name: float(nutrition.get(name, 0.0) or 0.0)
                for name in NutritionProfile.nutrient_names()
            }
        ),
        standard_portions=tuple(
            Portion(
                label=str(portion.get("label", "")),
                weight_g=float(portion.get("weight_g", 0.0)),
                description=str(portion.get("description") or ""),
                volume_ml=(
                    float(portion["volume_ml"])
                    if portion.get("volume_ml") is not None
                    else None
                ),
            )
            for portion in portions
        ),
        alternate_names=tuple(_load_json(row.get("alternate_names"), [])),
        allergens=frozenset(_load_json(row.get("allergens"), [])),
        diet_flags=DietFlags(
            is_vegetarian=bool(row.get("is_vegetarian", False)),
            is_vegan=bool(row.get("is_vegan", False)),
            is_halal_certified=bool(row.get("is_halal_certified", False)),
        ),
        region_availability=RegionAvailability(
            nationwide=bool(region.get("nationwide", True)),
            listings=frozenset(
                RegionListing(province=str(item["province"]), city=item.get("city"))
                for item in region.get("listings", [])
            ),
        ),
        popularity=int(row.get("popularity", 5)),
        cooking_methods=tuple(
            CookingMethod(method)
            for method in _load_json(row.get("cooking_methods"), [])
        ),
        origins=tuple(_load_json(row.get("origins"), [])),
    )


def _load_json(value: object, default: object) -> object:
    """Decode a JSON text column; jsonb columns arrive already decoded."""
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return json.loads(value)
    return value
