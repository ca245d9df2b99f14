"""Portion scaling for per-100g nutrition."""

from healthy_coaching.domain.foods import FoodItem, NutritionProfile
from healthy_coaching.errors import InvalidPortionError, InvalidPortionIndexError

_WHOLE_UNITS = frozenset(
    {
        "calories",
        "sodium_mg",
        "vitamin_a_iu",
        "vitamin_c_mg",
        "calcium_mg",
        "folate_mcg",
    }
)


def scale(nutrition_per_100g: NutritionProfile, weight_g: float) -> NutritionProfile:
    """Scale per-100g nutrition to a portion weight.

    Values are left unrounded so sums over many portions stay exact; use
    ``round_for_display`` at the presentation edge.
    """
    if weight_g <= 0:
        raise InvalidPortionError(weight_g)
    factor = weight_g / 100.0
    return NutritionProfile(
        **{
            name: value * factor
            for name, value in nutrition_per_100g.as_dict().items()
        }
    )


def round_for_display(profile: NutritionProfile) -> NutritionProfile:
    """Round whole-unit nutrients to integers and the rest to one decimal."""
    return NutritionProfile(
        **{
            name: float(round(value)) if name in _WHOLE_UNITS else round(value, 1)
            for name, value in profile.as_dict().items()
        }
    )


def portion_weight(
    food: FoodItem, portion_index: int, entry_id: str | None = None
) -> float:
    """Return the weight of a standard portion, validating the index."""
    count = len(food.standard_portions)
    if not 0 <= portion_index < count:
        raise InvalidPortionIndexError(
            food.id, portion_index, count, entry_id=entry_id
        )
    return food.standard_portions[portion_index].weight_g


def nutrition_for_portion(food: FoodItem, portion_index: int) -> NutritionProfile:
    """Return nutrition for one of the food's standard portions."""
    return scale(food.nutrition_per_100g, portion_weight(food, portion_index))


def closest_portion_index(food: FoodItem, target_calories: float) -> int:
    """Return the portion whose calories are nearest the target."""
    best_index = 0
    best_gap = float("inf")
    for index in range(len(food.standard_portions)):
        gap = abs(target_calories - nutrition_for_portion(food, index).calories)
        if gap < best_gap:
            best_gap = gap
            best_index = index
    return best_index
