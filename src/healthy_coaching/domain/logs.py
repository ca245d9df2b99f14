"""Domain models for food logging."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LogEntry:
    """One consumption event."""

    id: str
    user_id: str
    food_id: str
    portion_index: int
    consumed_at: datetime
    note: str | None = None
