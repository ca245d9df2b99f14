"""Tests for the public HTTP endpoints."""

import re
from datetime import UTC, date, datetime

import pytest
from fastapi.testclient import TestClient

from healthy_coaching.api.app import CORRELATION_HEADER, create_app
from healthy_coaching.containers import AppContainer
from healthy_coaching.domain.users import UserProfile
from tests.conftest import InMemoryProfileRepository

NOON_JAKARTA = datetime(2024, 3, 1, 5, tzinfo=UTC)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def profile(profile_repository: InMemoryProfileRepository) -> UserProfile:
    profile = UserProfile(
        user_id="user-1",
        full_name="Siti Rahma",
        birth_date=date(1990, 6, 15),
        height_cm=160.0,
        weight_kg=55.0,
        allergies=("kacang",),
        language="en",
    )
    profile_repository.profiles["user-1"] = profile
    return profile


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert re.match(r"^HC-\d{14}-[a-f0-9]{8}$", response.headers[CORRELATION_HEADER])


def test_daily_summary_endpoint(client: TestClient, container: AppContainer) -> None:
    container.food_log_service.log_meal("user-1", "rice", 0, consumed_at=NOON_JAKARTA)
    container.food_log_service.log_meal("user-1", "sop", 0, consumed_at=NOON_JAKARTA)

    response = client.get("/users/user-1/summary", params={"day": "2024-03-01"})

    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["day"] == "2024-03-01"
    assert data["summary"]["status"] == "below"
    assert data["summary"]["totals"]["calories"] == 348
    assert data["summary"]["totals"]["fiber_g"] == 5.8
    assert [alert["code"] for alert in data["summary"]["alerts"]] == [
        "FIBER_LOW",
        "CALORIE_LOW",
    ]
    assert data["summary"]["alerts"][0]["message"].startswith("Asupan serat")
    assert [food["id"] for food in data["recommendations"]] == [
        "gado",
        "sop",
        "rendang",
        "rice",
    ]
    assert data["target_next_day"] == 2000


def test_daily_summary_honours_accept_language(client: TestClient) -> None:
    response = client.get(
        "/users/user-1/summary",
        params={"day": "2024-03-01", "include_recommendations": "false"},
        headers={"Accept-Language": "en-US,en;q=0.9"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["recommendations"] == []
    assert data["summary"]["entry_count"] == 0
    assert data["tips"][0] == "Increase your portions gradually."


def test_daily_summary_tips_follow_request_language(
    client: TestClient, profile_repository: InMemoryProfileRepository
) -> None:
    profile_repository.profiles["user-1"] = UserProfile(
        user_id="user-1", full_name="Siti Rahma", language="en"
    )

    response = client.get(
        "/users/user-1/summary",
        params={"day": "2024-03-01"},
        headers={"Accept-Language": "id"},
    )

    data = response.json()
    assert data["summary"]["alerts"][0]["message"].startswith("Asupan serat")
    assert data["tips"][0] == "Tambahkan porsi makanan secara bertahap."


def test_daily_summary_survives_unknown_profile_timezone(
    client: TestClient, profile_repository: InMemoryProfileRepository
) -> None:
    profile_repository.profiles["user-1"] = UserProfile(
        user_id="user-1", full_name="Siti Rahma", timezone="Jakarta"
    )

    dated = client.get("/users/user-1/summary", params={"day": "2024-03-01"})
    today = client.get("/users/user-1/summary")

    assert dated.status_code == 200
    assert today.status_code == 200


def test_daily_summary_defaults_to_today(client: TestClient) -> None:
    response = client.get("/users/user-1/summary")

    assert response.status_code == 200
    assert response.json()["summary"]["entry_count"] == 0


def test_log_meal_endpoint(client: TestClient) -> None:
    response = client.post(
        "/users/user-1/logs",
        json={
            "food_id": "rice",
            "portion_index": 0,
            "consumed_at": "2024-03-01T12:00:00+07:00",
            "note": "makan siang",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == "user-1"
    assert data["food_id"] == "rice"
    assert data["note"] == "makan siang"


def test_log_meal_unknown_food_returns_localized_404(client: TestClient) -> None:
    response = client.post(
        "/users/user-1/logs",
        json={"food_id": "durian", "portion_index": 0},
        headers={CORRELATION_HEADER: "HC-20240301120000-abcdef12"},
    )

    assert response.status_code == 404
    data = response.json()
    assert data["code"] == "UNKNOWN_FOOD"
    assert data["message"] == "Makanan tidak ditemukan di katalog."
    assert data["correlation_id"] == "HC-20240301120000-abcdef12"
    assert response.headers[CORRELATION_HEADER] == "HC-20240301120000-abcdef12"


def test_log_meal_invalid_portion_returns_400(client: TestClient) -> None:
    response = client.post(
        "/users/user-1/logs",
        json={"food_id": "rice", "portion_index": 4},
        headers={"Accept-Language": "en"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "INVALID_PORTION_INDEX"
    assert data["message"].startswith("The selected portion")
    assert data["details"]["portion_count"] == 1


def test_log_meal_rejects_naive_timestamp(client: TestClient) -> None:
    response = client.post(
        "/users/user-1/logs",
        json={
            "food_id": "rice",
            "portion_index": 0,
            "consumed_at": "2024-03-01T12:00:00",
        },
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_update_and_delete_log(client: TestClient, container: AppContainer) -> None:
    entry = container.food_log_service.log_meal("user-1", "rice", 0)

    updated = client.patch(f"/logs/{entry.id}", json={"note": "porsi kecil"})
    deleted = client.delete(f"/logs/{entry.id}")
    missing = client.delete(f"/logs/{entry.id}")

    assert updated.status_code == 200
    assert updated.json()["note"] == "porsi kecil"
    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert missing.json()["code"] == "NOT_FOUND"


def test_set_calorie_target(client: TestClient, container: AppContainer) -> None:
    rejected = client.put(
        "/users/user-1/calorie-target",
        json={"day": "2024-03-01", "target_calories": 0},
    )
    accepted = client.put(
        "/users/user-1/calorie-target",
        json={"day": "2024-03-01", "target_calories": 1800},
    )

    assert rejected.status_code == 400
    assert rejected.json()["code"] == "INVALID_TARGET"
    assert accepted.status_code == 200
    profile_service = container.profile_service
    assert profile_service.get_daily_calorie_target("user-1", date(2024, 3, 1)) == 1800


def test_food_search_and_detail(client: TestClient) -> None:
    search = client.get("/foods/search", params={"q": "nasi"})
    detail = client.get("/foods/rice")
    missing = client.get("/foods/durian")

    assert search.status_code == 200
    assert [food["id"] for food in search.json()["foods"]] == ["rice"]
    assert detail.status_code == 200
    portion = detail.json()["standard_portions"][0]
    assert portion["weight_g"] == 200
    assert portion["nutrition"]["calories"] == 260
    assert missing.status_code == 404


@pytest.mark.usefixtures("profile")
def test_food_eligibility(client: TestClient) -> None:
    response = client.get("/foods/gado/eligibility", params={"user_id": "user-1"})

    assert response.status_code == 200
    data = response.json()
    assert data["eligible"] is False
    assert data["allergen_conflicts"] == ["kacang"]
    assert data["is_ramadan_dish"] is False


@pytest.mark.usefixtures("profile")
def test_user_profile(client: TestClient) -> None:
    response = client.get("/users/user-1/profile")
    missing = client.get("/users/user-2/profile")

    assert response.status_code == 200
    data = response.json()
    assert data["bmi"] == 21.5
    assert data["bmi_category"] == "normal"
    assert data["validation_errors"] == []
    assert missing.status_code == 404


def test_update_log_can_clear_note(client: TestClient, container: AppContainer) -> None:
    entry = container.food_log_service.log_meal("user-1", "rice", 0, note="siang")

    untouched = client.patch(f"/logs/{entry.id}", json={"portion_index": 0})
    cleared = client.patch(f"/logs/{entry.id}", json={"note": None})

    assert untouched.json()["note"] == "siang"
    assert cleared.status_code == 200
    assert cleared.json()["note"] is None


def test_food_search_rejects_non_positive_limit(client: TestClient) -> None:
    negative = client.get("/foods/search", params={"q": "", "limit": -1})
    zero = client.get("/foods/search", params={"q": "", "limit": 0})

    assert negative.status_code == 422
    assert zero.status_code == 422
