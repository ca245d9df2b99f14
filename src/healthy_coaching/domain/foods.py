"""Domain models for the Indonesian food catalog."""

from dataclasses import dataclass, field, fields
from enum import StrEnum

from healthy_coaching.errors import InvalidPortionError, ValidationError

MIN_POPULARITY = 1
MAX_POPULARITY = 10


class FoodCategory(StrEnum):
    """Catalog categories."""

    STAPLE = "staple"
    SIDE_DISH = "side_dish"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    SNACK = "snack"
    DRINK = "drink"
    CAKE = "cake"
    DRY_CAKE = "dry_cake"
    CONDIMENT = "condiment"
    SPICE_MIX = "spice_mix"


class CookingMethod(StrEnum):
    """How a dish is usually prepared."""

    FRIED = "fried"
    BOILED = "boiled"
    STEAMED = "steamed"
    GRILLED = "grilled"
    STEWED = "stewed"
    SAUTEED = "sauteed"
    ROASTED = "roasted"
    RAW = "raw"


@dataclass(frozen=True)
class NutritionProfile:
    """Nutrient amounts, either per 100g or for a concrete portion."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbohydrate_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sodium_mg: float = 0.0
    sugar_g: float = 0.0
    vitamin_a_iu: float = 0.0
    vitamin_c_mg: float = 0.0
    calcium_mg: float = 0.0
    iron_mg: float = 0.0
    folate_mcg: float = 0.0

    def __post_init__(self) -> None:
        negative = [item.name for item in fields(self) if getattr(self, item.name) < 0]
        if negative:
            raise ValidationError(
                "Nutrient values must be non-negative",
                validation_errors=[f"{name}_negative" for name in negative],
            )

    @classmethod
    def nutrient_names(cls) -> tuple[str, ...]:
        """Return the nutrient field names in declaration order."""
        return tuple(item.name for item in fields(cls))

    def as_dict(self) -> dict[str, float]:
        """Return nutrient values keyed by field name."""
        return {name: getattr(self, name) for name in self.nutrient_names()}


@dataclass(frozen=True)
class Portion:
    """A named serving with a fixed weight."""

    label: str
    weight_g: float
    description: str = ""
    volume_ml: float | None = None

    def __post_init__(self) -> None:
        if self.weight_g <= 0:
            raise InvalidPortionError(self.weight_g)


@dataclass(frozen=True)
class DietFlags:
    """Dietary suitability flags."""

    is_vegetarian: bool = False
    is_vegan: bool = False
    is_halal_certified: bool = False


@dataclass(frozen=True)
class RegionListing:
    """A province, optionally narrowed to one city."""

    province: str
    city: str | None = None


@dataclass(frozen=True)
class RegionAvailability:
    """Where a food can be found.

    A listing without a city covers every city of its province.
    """

    nationwide: bool = True
    listings: frozenset[RegionListing] = field(default_factory=frozenset)

    @classmethod
    def everywhere(cls) -> "RegionAvailability":
        """Return nationwide availability."""
        return cls(nationwide=True)

    @classmethod
    def only(cls, *listings: RegionListing) -> "RegionAvailability":
        """Return availability restricted to the given listings."""
        return cls(nationwide=False, listings=frozenset(listings))


@dataclass(frozen=True)
class FoodItem:
    """A catalog entry with nutrition per 100g."""

    id: str
    name: str
    category: FoodCategory
    nutrition_per_100g: NutritionProfile
    standard_portions: tuple[Portion, ...]
    alternate_names: tuple[str, ...] = ()
    allergens: frozenset[str] = frozenset()
    diet_flags: DietFlags = DietFlags()
    region_availability: RegionAvailability = RegionAvailability()
    popularity: int = 5
    cooking_methods: tuple[CookingMethod, ...] = ()
    origins: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        errors: list[str] = []
        if not self.id:
            errors.append("id_required")
        if not self.name.strip():
            errors.append("name_required")
        if not self.standard_portions:
            errors.append("standard_portions_required")
        if not MIN_POPULARITY <= self.popularity <= MAX_POPULARITY:
            errors.append("popularity_out_of_range")
        if errors:
            raise ValidationError(
                f"Invalid food item '{self.id}'",
                validation_errors=errors,
                context={"food_id": self.id},
            )
