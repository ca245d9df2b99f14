"""Tests for portion scaling."""

import pytest

from healthy_coaching.domain.foods import NutritionProfile
from healthy_coaching.errors import InvalidPortionError, InvalidPortionIndexError
from healthy_coaching.services.portions import (
    closest_portion_index,
    nutrition_for_portion,
    portion_weight,
    round_for_display,
    scale,
)
from tests.conftest import make_food


def test_scale_multiplies_every_nutrient_by_weight() -> None:
    per_100g = NutritionProfile(
        calories=130, protein_g=2.7, carbohydrate_g=28, fiber_g=0.4, sodium_mg=1
    )

    scaled = scale(per_100g, 200)

    assert scaled.calories == 260
    assert scaled.protein_g == pytest.approx(5.4)
    assert scaled.carbohydrate_g == pytest.approx(56)
    assert scaled.fiber_g == pytest.approx(0.8)
    assert scaled.sodium_mg == 2
    assert scaled.fat_g == 0


def test_scale_keeps_fractional_values_unrounded() -> None:
    scaled = scale(NutritionProfile(calories=89, protein_g=1.1), 15)

    assert scaled.calories == pytest.approx(13.35)
    assert scaled.protein_g == pytest.approx(0.165)


@pytest.mark.parametrize("weight", [0, -50])
def test_scale_rejects_non_positive_weight(weight: float) -> None:
    with pytest.raises(InvalidPortionError) as excinfo:
        scale(NutritionProfile(calories=100), weight)

    assert excinfo.value.code == "INVALID_PORTION"
    assert excinfo.value.weight_g == weight


def test_round_for_display_uses_whole_units_for_energy_and_minerals() -> None:
    rounded = round_for_display(
        NutritionProfile(
            calories=13.35,
            protein_g=0.165,
            sodium_mg=2.6,
            vitamin_c_mg=53.24,
            iron_mg=0.36,
        )
    )

    assert rounded.calories == 13
    assert rounded.protein_g == 0.2
    assert rounded.sodium_mg == 3
    assert rounded.vitamin_c_mg == 53
    assert rounded.iron_mg == 0.4


def test_portion_weight_validates_index() -> None:
    food = make_food("rice", portions=(15, 200))

    assert portion_weight(food, 1) == 200
    with pytest.raises(InvalidPortionIndexError) as excinfo:
        portion_weight(food, 2, entry_id="entry-1")

    assert excinfo.value.portion_count == 2
    assert excinfo.value.context["entry_id"] == "entry-1"


def test_nutrition_for_portion_scales_selected_portion() -> None:
    food = make_food("rice", calories=130, portions=(15, 200))

    assert nutrition_for_portion(food, 0).calories == pytest.approx(19.5)
    assert nutrition_for_portion(food, 1).calories == 260


def test_closest_portion_index_picks_nearest_calories() -> None:
    food = make_food("rice", calories=130, portions=(15, 100, 200))

    assert closest_portion_index(food, 250) == 2
    assert closest_portion_index(food, 20) == 0
    assert closest_portion_index(food, 130) == 1
