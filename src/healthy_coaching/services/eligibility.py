"""Eligibility rules matching foods against user constraints."""

from collections.abc import Iterable

from healthy_coaching.domain.foods import FoodItem, RegionAvailability
from healthy_coaching.domain.users import DietType, UserConstraints

KETO_NET_CARB_LIMIT_G = 5.0
KETO_SUGAR_LIMIT_G = 2.0
NUTRIENT_DENSE_THRESHOLD = 0.7

RAMADAN_DISHES = (
    "ketupat",
    "kolak",
    "kurma",
    "dates",
    "bubur kacang",
    "opor ayam",
    "soto",
    "gulai",
    "es buah",
    "sayur lodeh",
    "bubur sayur",
)


def is_eligible(food: FoodItem, constraints: UserConstraints) -> bool:
    """Return True when the food is permissible for the constraints."""
    if allergen_conflicts(food, constraints.allergens):
        return False
    if not fits_diet(food, constraints.diet_type):
        return False
    if constraints.requires_halal and not food.diet_flags.is_halal_certified:
        return False
    return is_available_in(
        food.region_availability, constraints.province, constraints.city
    )


def allergen_conflicts(food: FoodItem, allergens: Iterable[str]) -> set[str]:
    """Return the normalized allergens shared by food and user."""
    return _normalize(food.allergens) & _normalize(allergens)


def fits_diet(food: FoodItem, diet_type: DietType) -> bool:
    """Return True when the food suits the diet type."""
    flags = food.diet_flags
    if diet_type == DietType.VEGETARIAN:
        return flags.is_vegetarian
    if diet_type == DietType.VEGAN:
        return flags.is_vegan
    if diet_type == DietType.KETO:
        nutrition = food.nutrition_per_100g
        net_carbs = nutrition.carbohydrate_g - nutrition.fiber_g / 2
        return (
            net_carbs < KETO_NET_CARB_LIMIT_G
            and nutrition.sugar_g < KETO_SUGAR_LIMIT_G
        )
    return True


def is_available_in(
    availability: RegionAvailability, province: str | None, city: str | None = None
) -> bool:
    """Return True when the food is sold in the province and city.

    Province-only listings cover all cities in the province. A missing
    province is unconstrained, and a missing city passes once the province
    matches.
    """
    if availability.nationwide or not province:
        return True
    wanted_province = _key(province)
    in_province = [
        listing
        for listing in availability.listings
        if _key(listing.province) == wanted_province
    ]
    if not in_province:
        return False
    if not city or any(listing.city is None for listing in in_province):
        return True
    wanted_city = _key(city)
    return any(_key(listing.city or "") == wanted_city for listing in in_province)


def nutrient_density_score(food: FoodItem) -> float:
    """Score 0..1 rewarding protein and fiber, penalizing sugar and salt."""
    nutrition = food.nutrition_per_100g
    protein = min(nutrition.protein_g / 30, 1.0)
    fiber = min(nutrition.fiber_g / 15, 1.0)
    sugar = max(1 - nutrition.sugar_g / 15, 0.0)
    sodium = max(1 - nutrition.sodium_mg / 600, 0.0)
    return (protein + fiber + sugar + sodium) / 4


def is_nutrient_dense(food: FoodItem) -> bool:
    """Return True when the density score reaches the threshold."""
    return nutrient_density_score(food) >= NUTRIENT_DENSE_THRESHOLD


def is_ramadan_dish(food: FoodItem) -> bool:
    """Return True for dishes traditionally served during Ramadan."""
    names = [food.name, *food.alternate_names]
    return any(dish in name.lower() for name in names for dish in RAMADAN_DISHES)


def _normalize(values: Iterable[str]) -> set[str]:
    return {_key(value) for value in values if value and value.strip()}


def _key(value: str) -> str:
    return value.strip().casefold()
