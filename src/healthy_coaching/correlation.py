"""Correlation identifiers for tracing errors across layers."""

import re
from datetime import UTC, datetime
from uuid import uuid4

PLATFORM = "healthycoaching-id"
APP_VERSION = "1.0.0"

_CORRELATION_PATTERN = re.compile(r"HC-\d{14}-[a-f0-9]{8}")


def generate_correlation_id(now: datetime | None = None) -> str:
    """Return an id shaped like ``HC-20240101120000-1a2b3c4d``."""
    moment = now or datetime.now(tz=UTC)
    return f"HC-{moment.strftime('%Y%m%d%H%M%S')}-{uuid4().hex[:8]}"


def extract_correlation_id(value: BaseException | str) -> str | None:
    """Find a correlation id inside an error or a message."""
    text = value if isinstance(value, str) else str(value)
    match = _CORRELATION_PATTERN.search(text)
    return match.group(0) if match else None


def format_with_correlation(message: str, correlation_id: str) -> str:
    """Prefix a message with its correlation id."""
    return f"[{correlation_id}] {message}"


def create_error_context(
    correlation_id: str, context: dict[str, object] | None = None
) -> dict[str, object]:
    """Build a structured context payload for error logs."""
    return {
        "correlation_id": correlation_id,
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "platform": PLATFORM,
        "version": APP_VERSION,
        **(context or {}),
    }


def generate_request_id() -> str:
    """Return an id for an inbound API request."""
    return f"REQ-{generate_correlation_id()}"


def generate_session_id() -> str:
    """Return an id for a user session."""
    return f"SESSION-{generate_correlation_id()}"
