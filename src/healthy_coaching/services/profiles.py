"""User profile service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from healthy_coaching.domain.users import UserConstraints, UserProfile
from healthy_coaching.errors import InvalidTargetError, NotFoundError

_logger = logging.getLogger(__name__)


class UserProfileRepository(Protocol):
    """Persistence interface for profiles and nutrition goals."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile of a user, if present."""

    def get_calorie_target(self, user_id: str, day: date) -> float | None:
        """Return the most recent calorie goal set on or before the day."""

    def set_calorie_target(self, user_id: str, day: date, target: float) -> None:
        """Store a calorie goal effective from the day."""


@dataclass
class ProfileService:
    """Service for user profiles, constraints and calorie targets."""

    repository: UserProfileRepository
    default_calorie_target: float = 2000.0
    default_timezone: str = "Asia/Jakarta"
    default_language: str = "id"

    def find_profile(self, user_id: str) -> UserProfile | None:
        return self.repository.get_profile(user_id)

    def get_profile(self, user_id: str) -> UserProfile:
        """Return a profile or raise ``NotFoundError``."""
        profile = self.find_profile(user_id)
        if profile is None:
            raise NotFoundError("User profile", user_id)
        return profile

    def get_constraints(self, user_id: str) -> UserConstraints:
        """Return eligibility constraints, unconstrained without a profile."""
        return self.constraints_for(self.find_profile(user_id))

    def get_daily_calorie_target(self, user_id: str, day: date) -> float:
        """Return the user's calorie target for a day."""
        target = self.repository.get_calorie_target(user_id, day)
        if target is None:
            return self.default_calorie_target
        return target

    def set_calorie_target(self, user_id: str, day: date, target: float) -> None:
        """Persist a positive calorie target."""
        if target <= 0:
            raise InvalidTargetError(target)
        self.repository.set_calorie_target(user_id, day, target)

    def get_timezone(self, user_id: str) -> str:
        """Return the user's timezone or the default."""
        return self.timezone_for(self.find_profile(user_id))

    def get_language(self, user_id: str) -> str:
        """Return the user's preferred language or the default."""
        return self.language_for(self.find_profile(user_id))

    @staticmethod
    def constraints_for(profile: UserProfile | None) -> UserConstraints:
        if profile is None:
            return UserConstraints()
        return profile.to_constraints()

    def timezone_for(self, profile: UserProfile | None) -> str:
        """Return a loadable timezone name, falling back to the default.

        Stored profiles may carry names such as ``"Jakarta"`` that the tz
        database does not know.
        """
        if profile is None or not profile.timezone:
            return self.default_timezone
        if not is_valid_timezone(profile.timezone):
            _logger.warning(
                "Unknown timezone for user=%s: %r, using %s",
                profile.user_id,
                profile.timezone,
                self.default_timezone,
            )
            return self.default_timezone
        return profile.timezone

    def language_for(self, profile: UserProfile | None) -> str:
        return (profile.language if profile else None) or self.default_language


def is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def local_today(timezone_name: str) -> date:
    """Return the current calendar day in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()
