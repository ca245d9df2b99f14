"""Seed data for common Indonesian foods."""

import logging

from healthy_coaching.domain.foods import (
    CookingMethod,
    DietFlags,
    FoodCategory,
    FoodItem,
    NutritionProfile,
    Portion,
)
from healthy_coaching.services.catalog import CatalogService

_logger = logging.getLogger(__name__)

_HALAL = DietFlags(is_halal_certified=True)
_HALAL_VEGETARIAN = DietFlags(is_vegetarian=True, is_halal_certified=True)
_HALAL_VEGAN = DietFlags(is_vegetarian=True, is_vegan=True, is_halal_certified=True)

SEED_FOODS: tuple[FoodItem, ...] = (
    FoodItem(
        id="mk-001",
        name="Nasi Putih",
        category=FoodCategory.STAPLE,
        nutrition_per_100g=NutritionProfile(
            calories=130,
            protein_g=2.7,
            carbohydrate_g=28,
            fat_g=0.3,
            fiber_g=0.4,
            sodium_mg=1,
            sugar_g=0.1,
            calcium_mg=10,
            iron_mg=0.5,
            folate_mcg=8,
        ),
        standard_portions=(
            Portion("1 sendok makan", 15, "Nasi putih standar"),
            Portion("1 piring", 200, "Porsi nasi standar"),
        ),
        diet_flags=_HALAL_VEGAN,
        popularity=10,
        cooking_methods=(CookingMethod.BOILED,),
        origins=("Jawa", "Sumatera", "Bali", "Sulawesi"),
    ),
    FoodItem(
        id="mk-002",
        name="Nasi Goreng",
        category=FoodCategory.STAPLE,
        nutrition_per_100g=NutritionProfile(
            calories=165,
            protein_g=7,
            carbohydrate_g=30,
            fat_g=4,
            fiber_g=1,
            sodium_mg=300,
            sugar_g=5,
            vitamin_a_iu=200,
            vitamin_c_mg=20,
            calcium_mg=30,
            iron_mg=2,
            folate_mcg=6,
        ),
        standard_portions=(
            Portion("1 piring", 300, "Nasi goreng dengan telur dan sayuran"),
        ),
        allergens=frozenset({"telur", "kecap"}),
        diet_flags=_HALAL,
        popularity=10,
        cooking_methods=(CookingMethod.FRIED,),
        origins=("Jawa", "Sumatera"),
    ),
    FoodItem(
        id="mk-003",
        name="Ayam Bakar",
        category=FoodCategory.SIDE_DISH,
        nutrition_per_100g=NutritionProfile(
            calories=190,
            protein_g=25,
            carbohydrate_g=3,
            fat_g=8,
            fiber_g=0.5,
            sodium_mg=400,
            sugar_g=8,
            vitamin_a_iu=100,
            vitamin_c_mg=5,
            calcium_mg=15,
            iron_mg=2,
            folate_mcg=5,
        ),
        standard_portions=(Portion("1 potong", 150, "Ayam bakar dengan bumbu kecap"),),
        allergens=frozenset({"kedelai"}),
        diet_flags=_HALAL,
        popularity=9,
        cooking_methods=(CookingMethod.GRILLED,),
        origins=("Jawa", "Sumatera"),
    ),
    FoodItem(
        id="mk-004",
        name="Rendang Padang",
        alternate_names=("Rendang",),
        category=FoodCategory.SIDE_DISH,
        nutrition_per_100g=NutritionProfile(
            calories=220,
            protein_g=28,
            carbohydrate_g=5,
            fat_g=12,
            fiber_g=1,
            sodium_mg=600,
            sugar_g=10,
            vitamin_a_iu=150,
            vitamin_c_mg=8,
            calcium_mg=20,
            iron_mg=3,
            folate_mcg=7,
        ),
        standard_portions=(Portion("1 potong", 100, "Rendang daging sapi pedas"),),
        allergens=frozenset({"santan"}),
        diet_flags=_HALAL,
        popularity=10,
        cooking_methods=(CookingMethod.BOILED, CookingMethod.FRIED),
        origins=("Sumatera Barat",),
    ),
    FoodItem(
        id="mk-005",
        name="Sayur Sop",
        category=FoodCategory.VEGETABLE,
        nutrition_per_100g=NutritionProfile(
            calories=35,
            protein_g=2,
            carbohydrate_g=6,
            fat_g=1,
            fiber_g=2,
            sodium_mg=200,
            sugar_g=3,
            vitamin_a_iu=300,
            vitamin_c_mg=25,
            calcium_mg=40,
            iron_mg=1,
            folate_mcg=30,
        ),
        standard_portions=(
            Portion("1 mangkok", 250, "Sayur sop campuran sayuran segar"),
        ),
        diet_flags=_HALAL_VEGAN,
        popularity=8,
        cooking_methods=(CookingMethod.BOILED,),
        origins=("Jawa",),
    ),
    FoodItem(
        id="mk-006",
        name="Gado-Gado",
        category=FoodCategory.VEGETABLE,
        nutrition_per_100g=NutritionProfile(
            calories=120,
            protein_g=6,
            carbohydrate_g=15,
            fat_g=5,
            fiber_g=3,
            sodium_mg=250,
            sugar_g=8,
            vitamin_a_iu=400,
            vitamin_c_mg=35,
            calcium_mg=80,
            iron_mg=2,
            folate_mcg=40,
        ),
        standard_portions=(Portion("1 piring", 300, "Gado-gado dengan bumbu kacang"),),
        allergens=frozenset({"kacang", "telur"}),
        diet_flags=_HALAL_VEGETARIAN,
        popularity=9,
        cooking_methods=(CookingMethod.BOILED,),
        origins=("Jawa",),
    ),
    FoodItem(
        id="mk-007",
        name="Sate Ayam",
        category=FoodCategory.SNACK,
        nutrition_per_100g=NutritionProfile(
            calories=180,
            protein_g=22,
            carbohydrate_g=8,
            fat_g=7,
            fiber_g=0.5,
            sodium_mg=350,
            sugar_g=12,
            vitamin_a_iu=120,
            vitamin_c_mg=10,
            calcium_mg=18,
            iron_mg=2.5,
            folate_mcg=8,
        ),
        standard_portions=(Portion("10 tusuk", 200, "Sate ayam dengan bumbu kacang"),),
        allergens=frozenset({"kacang", "kedelai"}),
        diet_flags=_HALAL,
        popularity=10,
        cooking_methods=(CookingMethod.GRILLED, CookingMethod.ROASTED),
        origins=("Jawa", "Madura"),
    ),
    FoodItem(
        id="mk-008",
        name="Bakso",
        category=FoodCategory.SNACK,
        nutrition_per_100g=NutritionProfile(
            calories=160,
            protein_g=18,
            carbohydrate_g=10,
            fat_g=6,
            fiber_g=0.8,
            sodium_mg=400,
            sugar_g=3,
            vitamin_a_iu=80,
            vitamin_c_mg=5,
            calcium_mg=25,
            iron_mg=2,
            folate_mcg=15,
        ),
        standard_portions=(Portion("1 mangkok", 350, "Bakso dengan kuah dan mie"),),
        diet_flags=_HALAL,
        popularity=10,
        cooking_methods=(CookingMethod.BOILED,),
        origins=("Jawa",),
    ),
    FoodItem(
        id="mk-009",
        name="Pisang",
        category=FoodCategory.FRUIT,
        nutrition_per_100g=NutritionProfile(
            calories=89,
            protein_g=1.1,
            carbohydrate_g=23,
            fat_g=0.3,
            fiber_g=2.6,
            sodium_mg=1,
            sugar_g=12,
            vitamin_a_iu=64,
            vitamin_c_mg=8.7,
            calcium_mg=5,
            iron_mg=0.3,
            folate_mcg=20,
        ),
        standard_portions=(Portion("1 buah", 120, "Pisang ambon atau raja"),),
        diet_flags=_HALAL_VEGAN,
        popularity=9,
        cooking_methods=(CookingMethod.RAW,),
        origins=("Indonesia",),
    ),
    FoodItem(
        id="mk-010",
        name="Jeruk",
        category=FoodCategory.FRUIT,
        nutrition_per_100g=NutritionProfile(
            calories=47,
            protein_g=0.9,
            carbohydrate_g=12,
            fat_g=0.1,
            fiber_g=2.4,
            sodium_mg=0,
            sugar_g=9,
            vitamin_a_iu=225,
            vitamin_c_mg=53.2,
            calcium_mg=40,
            iron_mg=0.1,
            folate_mcg=30,
        ),
        standard_portions=(Portion("1 buah", 200, "Jeruk manis atau keprok"),),
        diet_flags=_HALAL_VEGAN,
        popularity=8,
        cooking_methods=(CookingMethod.RAW,),
        origins=("Indonesia",),
    ),
)


def seed_catalog(catalog: CatalogService) -> int:
    """Upsert the seed foods into the catalog and return how many."""
    for food in SEED_FOODS:
        catalog.upsert_food(food)
    _logger.info("Catalog seeded: foods=%s", len(SEED_FOODS))
    return len(SEED_FOODS)
