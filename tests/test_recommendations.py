"""Tests for recommendation selection."""

from healthy_coaching.domain.foods import FoodItem
from healthy_coaching.domain.summary import AlertCode
from healthy_coaching.domain.users import DietType, UserConstraints
from healthy_coaching.services.cache import InMemoryCache
from healthy_coaching.services.catalog import CatalogService
from healthy_coaching.services.recommendations import recommend, recommend_by_alert
from tests.conftest import InMemoryFoodRepository, make_food


def _catalog(*foods: FoodItem) -> CatalogService:
    repository = InMemoryFoodRepository()
    repository.add(*foods)
    return CatalogService(repository=repository, cache=InMemoryCache())


def test_fiber_low_prefers_high_fiber_foods(catalog_service: CatalogService) -> None:
    foods = recommend([AlertCode.FIBER_LOW], catalog_service, UserConstraints())

    assert [food.id for food in foods] == ["gado", "sop", "rendang", "rice"]


def test_calorie_high_prefers_light_foods(catalog_service: CatalogService) -> None:
    foods = recommend(
        [AlertCode.CALORIE_HIGH], catalog_service, UserConstraints(), limit=2
    )

    assert [food.id for food in foods] == ["sop", "gado"]


def test_calorie_low_prefers_dense_foods(catalog_service: CatalogService) -> None:
    foods = recommend(
        [AlertCode.CALORIE_LOW], catalog_service, UserConstraints(), limit=1
    )

    assert [food.id for food in foods] == ["rendang"]


def test_recommendations_respect_constraints(catalog_service: CatalogService) -> None:
    constraints = UserConstraints(
        allergens=frozenset({"kacang"}), diet_type=DietType.VEGETARIAN
    )

    foods = recommend([AlertCode.FIBER_LOW], catalog_service, constraints)

    assert [food.id for food in foods] == ["sop"]


def test_alerts_without_rules_contribute_nothing(
    catalog_service: CatalogService,
) -> None:
    alerts = [AlertCode.SALT_EXCESS, AlertCode.SUGAR_EXCESS]

    assert recommend(alerts, catalog_service, UserConstraints()) == []
    assert recommend([], catalog_service, UserConstraints()) == []


def test_empty_catalog_returns_empty_list() -> None:
    assert recommend([AlertCode.FIBER_LOW], _catalog(), UserConstraints()) == []


def test_multiple_alerts_merge_without_duplicates() -> None:
    catalog = _catalog(
        make_food("sop", calories=35, fiber_g=2),
        make_food("salad", calories=60, fiber_g=5),
        make_food("rice", calories=130, fiber_g=0.4),
    )

    foods = recommend(
        [AlertCode.FIBER_LOW, AlertCode.CALORIE_HIGH],
        catalog,
        UserConstraints(),
        limit=2,
    )

    assert [food.id for food in foods] == ["salad", "sop"]


def test_recommend_by_alert_groups_candidates() -> None:
    catalog = _catalog(
        make_food("sop", calories=35, fiber_g=2),
        make_food("salad", calories=60, fiber_g=5),
    )

    grouped = recommend_by_alert(
        [AlertCode.SALT_EXCESS, AlertCode.FIBER_LOW, AlertCode.CALORIE_HIGH],
        catalog,
        UserConstraints(),
    )

    assert list(grouped) == [AlertCode.FIBER_LOW, AlertCode.CALORIE_HIGH]
    assert [food.id for food in grouped[AlertCode.FIBER_LOW]] == ["salad", "sop"]
    assert [food.id for food in grouped[AlertCode.CALORIE_HIGH]] == ["sop", "salad"]


def test_ties_are_broken_by_popularity() -> None:
    catalog = _catalog(
        make_food("a", fiber_g=3, popularity=4),
        make_food("b", fiber_g=3, popularity=9),
    )

    foods = recommend([AlertCode.FIBER_LOW], catalog, UserConstraints())

    assert [food.id for food in foods] == ["b", "a"]
