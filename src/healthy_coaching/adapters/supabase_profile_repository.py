"""Supabase repository for user profiles and nutrition goals."""

import json
from dataclasses import dataclass
from datetime import date

from supabase import Client

from healthy_coaching.domain.users import DietType, UserProfile
from healthy_coaching.services.profiles import UserProfileRepository


@dataclass
class SupabaseProfileRepository(UserProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return a user's profile."""
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def get_calorie_target(self, user_id: str, day: date) -> float | None:
        """Return the latest goal effective on the day."""
        response = (
            self.client.table("nutrition_goals")
            .select("target_calories")
            .eq("user_id", user_id)
            .lte("day", day.isoformat())
            .order("day", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return float(response.data[0]["target_calories"])

    def set_calorie_target(self, user_id: str, day: date, target: float) -> None:
        """Upsert the goal for a user and day."""
        self.client.table("nutrition_goals").upsert(
            {
                "user_id": user_id,
                "day": day.isoformat(),
                "target_calories": target,
            },
            on_conflict="user_id,day",
        ).execute()


def _parse_profile(row: dict[str, object]) -> UserProfile:
    birth_raw = row.get("birth_date")
    allergies = row.get("allergies") or []
    if isinstance(allergies, str):
        allergies = json.loads(allergies)
    return UserProfile(
        user_id=str(row["user_id"]),
        full_name=str(row.get("full_name", "")),
        birth_date=(
            date.fromisoformat(birth_raw)
            if isinstance(birth_raw, str) and birth_raw
            else None
        ),
        sex=row.get("sex"),
        height_cm=_optional_float(row.get("height_cm")),
        weight_kg=_optional_float(row.get("weight_kg")),
        allergies=tuple(allergies),
        diet_type=DietType(row.get("diet_type") or DietType.NONE),
        halal_only=bool(row.get("halal_only", False)),
        province=row.get("province"),
        city=row.get("city"),
        language=str(row.get("language") or "id"),
        timezone=row.get("timezone"),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None
