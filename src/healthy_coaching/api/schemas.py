"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel, Field

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
from healthy_coaching.domain.logs import LogEntry
from healthy_coaching.domain.summary import (
    AlertCode,
    DailyNutritionSummary,
    DailyReport,
    NutritionStatus,
)
from healthy_coaching.domain.users import DietType, UserProfile
from healthy_coaching.localization import coaching_tips, render_alert
from healthy_coaching.services.portions import round_for_display, scale


class NutritionModel(BaseModel):
    """Nutrient amounts."""

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

    @classmethod
    def for_display(cls, profile: NutritionProfile) -> "NutritionModel":
        return cls(**round_for_display(profile).as_dict())

    def to_profile(self) -> NutritionProfile:
        return NutritionProfile(**self.model_dump())


class PortionIn(BaseModel):
    """Standard portion payload."""

    label: str
    weight_g: float
    description: str = ""
    volume_ml: float | None = None


class PortionOut(PortionIn):
    """Standard portion with its nutrition."""

    nutrition: NutritionModel


class RegionModel(BaseModel):
    """Province, optionally narrowed to a city."""

    province: str
    city: str | None = None


class FoodIn(BaseModel):
    """Administrative food payload."""

    name: str
    category: FoodCategory
    nutrition_per_100g: NutritionModel
    standard_portions: list[PortionIn]
    alternate_names: list[str] = Field(default_factory=list)
    allergens: list[str] = Field(default_factory=list)
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_halal_certified: bool = False
    nationwide: bool = True
    regions: list[RegionModel] = Field(default_factory=list)
    popularity: int = 5
    cooking_methods: list[CookingMethod] = Field(default_factory=list)
    origins: list[str] = Field(default_factory=list)

    def to_food(self, food_id: str) -> FoodItem:
        """Build a domain food, letting the domain enforce invariants."""
        return FoodItem(
            id=food_id,
            name=self.name,
            category=self.category,
            nutrition_per_100g=self.nutrition_per_100g.to_profile(),
            standard_portions=tuple(
                Portion(
                    label=portion.label,
                    weight_g=portion.weight_g,
                    description=portion.description,
                    volume_ml=portion.volume_ml,
                )
                for portion in self.standard_portions
            ),
            alternate_names=tuple(self.alternate_names),
            allergens=frozenset(self.allergens),
            diet_flags=DietFlags(
                is_vegetarian=self.is_vegetarian,
                is_vegan=self.is_vegan,
                is_halal_certified=self.is_halal_certified,
            ),
            region_availability=RegionAvailability(
                nationwide=self.nationwide,
                listings=frozenset(
                    RegionListing(province=region.province, city=region.city)
                    for region in self.regions
                ),
            ),
            popularity=self.popularity,
            cooking_methods=tuple(self.cooking_methods),
            origins=tuple(self.origins),
        )


class FoodOut(BaseModel):
    """Catalog food."""

    id: str
    name: str
    category: FoodCategory
    nutrition_per_100g: NutritionModel
    standard_portions: list[PortionOut]
    alternate_names: list[str]
    allergens: list[str]
    is_vegetarian: bool
    is_vegan: bool
    is_halal_certified: bool
    nationwide: bool
    regions: list[RegionModel]
    popularity: int
    cooking_methods: list[CookingMethod]
    origins: list[str]

    @classmethod
    def from_food(cls, food: FoodItem) -> "FoodOut":
        availability = food.region_availability
        return cls(
            id=food.id,
            name=food.name,
            category=food.category,
            nutrition_per_100g=NutritionModel.for_display(food.nutrition_per_100g),
            standard_portions=[
                PortionOut(
                    label=portion.label,
                    weight_g=portion.weight_g,
                    description=portion.description,
                    volume_ml=portion.volume_ml,
                    nutrition=NutritionModel.for_display(
                        scale(food.nutrition_per_100g, portion.weight_g)
                    ),
                )
                for portion in food.standard_portions
            ],
            alternate_names=list(food.alternate_names),
            allergens=sorted(food.allergens),
            is_vegetarian=food.diet_flags.is_vegetarian,
            is_vegan=food.diet_flags.is_vegan,
            is_halal_certified=food.diet_flags.is_halal_certified,
            nationwide=availability.nationwide,
            regions=[
                RegionModel(province=listing.province, city=listing.city)
                for listing in sorted(
                    availability.listings,
                    key=lambda item: (item.province, item.city or ""),
                )
            ],
            popularity=food.popularity,
            cooking_methods=list(food.cooking_methods),
            origins=list(food.origins),
        )


class AlertOut(BaseModel):
    """Alert with localized text."""

    code: AlertCode
    level: str
    message: str


class SummaryOut(BaseModel):
    """Daily nutrition summary."""

    day: date
    totals: NutritionModel
    target_calories: float
    percent_of_target: float
    status: NutritionStatus
    alerts: list[AlertOut]
    entry_count: int

    @classmethod
    def from_summary(
        cls, summary: DailyNutritionSummary, language: str
    ) -> "SummaryOut":
        return cls(
            day=summary.day,
            totals=NutritionModel.for_display(summary.totals),
            target_calories=summary.target_calories,
            percent_of_target=round(summary.percent_of_target, 1),
            status=summary.status,
            alerts=[
                AlertOut(
                    code=alert.code, level=alert.level, message=alert.message
                )
                for alert in (render_alert(code, language) for code in summary.alerts)
            ],
            entry_count=summary.entry_count,
        )


class ReportOut(BaseModel):
    """Daily summary with coaching output."""

    summary: SummaryOut
    recommendations: list[FoodOut]
    tips: list[str]
    target_next_day: float

    @classmethod
    def from_report(cls, report: DailyReport, language: str) -> "ReportOut":
        return cls(
            summary=SummaryOut.from_summary(report.summary, language),
            recommendations=[
                FoodOut.from_food(food) for food in report.recommendations
            ],
            tips=coaching_tips(
                report.summary.status, report.summary.alerts, language
            ),
            target_next_day=report.target_next_day,
        )


class LogEntryIn(BaseModel):
    """Request to log a consumed food."""

    food_id: str
    portion_index: int
    consumed_at: datetime | None = None
    note: str | None = None


class LogEntryPatch(BaseModel):
    """Request to edit a log entry."""

    portion_index: int | None = None
    consumed_at: datetime | None = None
    note: str | None = None


class LogEntryOut(BaseModel):
    """Stored log entry."""

    id: str
    user_id: str
    food_id: str
    portion_index: int
    consumed_at: datetime
    note: str | None = None

    @classmethod
    def from_entry(cls, entry: LogEntry) -> "LogEntryOut":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            food_id=entry.food_id,
            portion_index=entry.portion_index,
            consumed_at=entry.consumed_at,
            note=entry.note,
        )


class CalorieTargetIn(BaseModel):
    """Request to set a daily calorie target."""

    day: date
    target_calories: float


class EligibilityOut(BaseModel):
    """Eligibility of a food for a user."""

    food_id: str
    user_id: str
    eligible: bool
    allergen_conflicts: list[str]
    nutrient_density_score: float
    is_nutrient_dense: bool
    is_ramadan_dish: bool


class ProfileOut(BaseModel):
    """User profile with derived body metrics."""

    user_id: str
    full_name: str
    age: int | None
    bmi: float | None
    bmi_category: str | None
    diet_type: DietType
    halal_only: bool
    allergies: list[str]
    province: str | None
    city: str | None
    language: str
    timezone: str | None
    validation_errors: list[str]

    @classmethod
    def from_profile(cls, profile: UserProfile, today: date) -> "ProfileOut":
        bmi = profile.bmi()
        return cls(
            user_id=profile.user_id,
            full_name=profile.full_name,
            age=profile.age(today),
            bmi=round(bmi, 1) if bmi is not None else None,
            bmi_category=profile.bmi_category(),
            diet_type=profile.diet_type,
            halal_only=profile.halal_only,
            allergies=list(profile.allergies),
            province=profile.province,
            city=profile.city,
            language=profile.language,
            timezone=profile.timezone,
            validation_errors=profile.validate_profile(),
        )
