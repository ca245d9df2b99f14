"""Domain models for users and their dietary constraints."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

MIN_HEIGHT_CM = 100
MAX_HEIGHT_CM = 250
MIN_WEIGHT_KG = 30
MAX_WEIGHT_KG = 300
MIN_NAME_LENGTH = 2

# Asia-Pacific BMI cut-offs.
BMI_UNDERWEIGHT = 18.5
BMI_NORMAL = 23.0
BMI_OVERWEIGHT = 25.0
BMI_OBESE_1 = 30.0


class DietType(StrEnum):
    """Dietary pattern a user follows."""

    NONE = "none"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"


@dataclass(frozen=True)
class UserConstraints:
    """Profile view used for food eligibility checks."""

    allergens: frozenset[str] = frozenset()
    diet_type: DietType = DietType.NONE
    requires_halal: bool = False
    province: str | None = None
    city: str | None = None


@dataclass(frozen=True)
class UserProfile:
    """Personal and dietary profile of a user."""

    user_id: str
    full_name: str
    birth_date: date | None = None
    sex: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    allergies: tuple[str, ...] = ()
    diet_type: DietType = DietType.NONE
    halal_only: bool = False
    province: str | None = None
    city: str | None = None
    language: str = "id"
    timezone: str | None = None

    def age(self, today: date) -> int | None:
        """Return age in full years on the given day."""
        if self.birth_date is None:
            return None
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return years

    def bmi(self) -> float | None:
        """Return body mass index when height and weight are known."""
        if not self.height_cm or not self.weight_kg:
            return None
        height_m = self.height_cm / 100
        return self.weight_kg / (height_m * height_m)

    def bmi_category(self) -> str | None:
        """Classify BMI with Asia-Pacific cut-offs."""
        value = self.bmi()
        if value is None:
            return None
        if value < BMI_UNDERWEIGHT:
            return "underweight"
        if value < BMI_NORMAL:
            return "normal"
        if value < BMI_OVERWEIGHT:
            return "overweight"
        if value < BMI_OBESE_1:
            return "obese_1"
        return "obese_2"

    def validate_profile(self) -> list[str]:
        """Return validation error codes, empty when the profile is valid."""
        errors: list[str] = []
        if self.height_cm is not None and not (
            MIN_HEIGHT_CM <= self.height_cm <= MAX_HEIGHT_CM
        ):
            errors.append("height_out_of_range")
        if self.weight_kg is not None and not (
            MIN_WEIGHT_KG <= self.weight_kg <= MAX_WEIGHT_KG
        ):
            errors.append("weight_out_of_range")
        if len(self.full_name.strip()) < MIN_NAME_LENGTH:
            errors.append("full_name_too_short")
        return errors

    def to_constraints(self) -> UserConstraints:
        """Derive eligibility constraints from the profile."""
        return UserConstraints(
            allergens=frozenset(self.allergies),
            diet_type=self.diet_type,
            requires_halal=self.halal_only,
            province=self.province,
            city=self.city,
        )
