"""Supabase repository for food log entries."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from healthy_coaching.domain.logs import LogEntry
from healthy_coaching.errors import RepositoryError
from healthy_coaching.services.food_logs import FoodLogRepository

_TABLE = "food_logs"
_COLUMNS = "id, user_id, food_id, portion_index, consumed_at, note"


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_entry(self, entry: LogEntry) -> LogEntry:
        """Insert a log entry row."""
        response = self.client.table(_TABLE).insert(_to_row(entry)).execute()
        if not response.data:
            raise RepositoryError(
                "Failed to create food log entry",
                repository=type(self).__name__,
                operation="create_entry",
                entity_id=entry.id,
            )
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: str) -> LogEntry | None:
        """Return a log entry by id."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("id", entry_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Return entries consumed in the time range."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .gte("consumed_at", start.isoformat())
            .lt("consumed_at", end.isoformat())
            .order("consumed_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(self, entry: LogEntry) -> LogEntry:
        """Replace portion, time and note of an entry."""
        response = (
            self.client.table(_TABLE)
            .update(
                {
                    "portion_index": entry.portion_index,
                    "consumed_at": entry.consumed_at.isoformat(),
                    "note": entry.note,
                }
            )
            .eq("id", entry.id)
            .execute()
        )
        if not response.data:
            raise RepositoryError(
                "Failed to update food log entry",
                repository=type(self).__name__,
                operation="update_entry",
                entity_id=entry.id,
            )
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry row."""
        response = self.client.table(_TABLE).delete().eq("id", entry_id).execute()
        return bool(response.data)


def _to_row(entry: LogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "food_id": entry.food_id,
        "portion_index": entry.portion_index,
        "consumed_at": entry.consumed_at.isoformat(),
        "note": entry.note,
    }


def _parse_entry(row: dict[str, object]) -> LogEntry:
    return LogEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        food_id=str(row["food_id"]),
        portion_index=int(row.get("portion_index", 0)),
        consumed_at=datetime.fromisoformat(str(row["consumed_at"])),
        note=row.get("note"),
    )
