"""Food logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol, cast
from uuid import uuid4
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from healthy_coaching.domain.logs import LogEntry
from healthy_coaching.errors import NotFoundError, UnknownFoodError, ValidationError
from healthy_coaching.services.catalog import CatalogService
from healthy_coaching.services.portions import portion_weight

_logger = logging.getLogger(__name__)

UNCHANGED = object()


class FoodLogRepository(Protocol):
    """Persistence interface for food log entries."""

    def create_entry(self, entry: LogEntry) -> LogEntry:
        """Persist a new entry and return it."""

    def get_entry(self, entry_id: str) -> LogEntry | None:
        """Return an entry by id, if present."""

    def list_entries(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Return entries consumed within ``[start, end)``."""

    def update_entry(self, entry: LogEntry) -> LogEntry:
        """Replace an existing entry and return it."""

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry, returning False when it did not exist."""


@dataclass
class FoodLogService:
    """Records, edits and reads what users ate."""

    repository: FoodLogRepository
    catalog: CatalogService

    def log_meal(  # noqa: PLR0913
        self,
        user_id: str,
        food_id: str,
        portion_index: int,
        consumed_at: datetime | None = None,
        note: str | None = None,
    ) -> LogEntry:
        """Validate and persist a consumption event."""
        self._validate_reference(food_id, portion_index)
        entry = LogEntry(
            id=str(uuid4()),
            user_id=user_id,
            food_id=food_id,
            portion_index=portion_index,
            consumed_at=_require_aware(consumed_at or datetime.now(tz=UTC)),
            note=note,
        )
        created = self.repository.create_entry(entry)
        _logger.info(
            "Food logged: user=%s food=%s portion=%s",
            user_id,
            food_id,
            portion_index,
        )
        return created

    def update_entry(
        self,
        entry_id: str,
        *,
        portion_index: int | None = None,
        consumed_at: datetime | None = None,
        note: str | None | object = UNCHANGED,
    ) -> LogEntry:
        """Edit the portion, time or note of an entry.

        ``note=None`` clears the note; omit it to keep the current one.
        """
        current = self.repository.get_entry(entry_id)
        if current is None:
            raise NotFoundError("Log entry", entry_id)
        updated = current
        if portion_index is not None:
            self._validate_reference(current.food_id, portion_index)
            updated = replace(updated, portion_index=portion_index)
        if consumed_at is not None:
            updated = replace(updated, consumed_at=_require_aware(consumed_at))
        if note is not UNCHANGED:
            updated = replace(updated, note=cast(str | None, note))
        return self.repository.update_entry(updated)

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        if not self.repository.delete_entry(entry_id):
            raise NotFoundError("Log entry", entry_id)

    def get_entries_for_user_and_date(
        self, user_id: str, day: date, timezone_name: str
    ) -> list[LogEntry]:
        """Return entries eaten on a calendar day in the user's timezone."""
        try:
            tz = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise ValidationError(
                f"Unknown timezone: {timezone_name}",
                validation_errors=["invalid_timezone"],
            ) from exc
        start = datetime.combine(day, time.min, tzinfo=tz)
        end = start + timedelta(days=1)
        entries = self.repository.list_entries(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return [
            entry
            for entry in entries
            if entry.consumed_at.astimezone(tz).date() == day
        ]

    def _validate_reference(self, food_id: str, portion_index: int) -> None:
        food = self.catalog.get(food_id)
        if food is None:
            raise UnknownFoodError(food_id)
        portion_weight(food, portion_index)


def _require_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        raise ValidationError(
            "consumed_at must be timezone-aware",
            validation_errors=["consumed_at_naive"],
        )
    return value
