"""Application error hierarchy with correlation id support.

Every error carries a stable machine-readable ``code``. Message text is for
logs only; user-facing wording is rendered by ``healthy_coaching.localization``.
"""

from datetime import UTC, datetime
from enum import StrEnum

from healthy_coaching.correlation import (
    format_with_correlation,
    generate_correlation_id,
)


class Severity(StrEnum):
    """How urgently an error needs attention."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class HealthyCoachingError(Exception):
    """Base class for all application errors."""

    code = "INTERNAL_ERROR"
    severity = Severity.MEDIUM
    retryable = False

    def __init__(
        self,
        message: str,
        *,
        correlation_id: str | None = None,
        context: dict[str, object] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.timestamp = datetime.now(tz=UTC)
        self.context = dict(context or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def formatted_message(self) -> str:
        """Return the message prefixed with the correlation id."""
        return format_with_correlation(self.message, self.correlation_id)

    def summary(self) -> dict[str, object]:
        """Return a structured summary for logging."""
        return {
            "name": type(self).__name__,
            "message": self.message,
            "correlation_id": self.correlation_id,
            "code": self.code,
            "timestamp": self.timestamp.isoformat(),
            "severity": str(self.severity),
            "retryable": self.retryable,
            "context": self.context,
        }

    def to_dict(self) -> dict[str, object]:
        """Return the payload exposed to API clients."""
        return {
            "error": self.message,
            "code": self.code,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "retryable": self.retryable,
            "details": self.context,
        }

    def should_report(self) -> bool:
        """Return True when the error belongs in monitoring."""
        return self.severity in {Severity.HIGH, Severity.CRITICAL}

    def has_code(self, code: str) -> bool:
        """Return True when the error code matches."""
        return self.code == code


class ValidationError(HealthyCoachingError, ValueError):
    """Input violates a domain invariant."""

    code = "VALIDATION_ERROR"
    severity = Severity.LOW

    def __init__(
        self,
        message: str,
        *,
        validation_errors: list[str] | None = None,
        correlation_id: str | None = None,
        context: dict[str, object] | None = None,
    ) -> None:
        self.validation_errors = list(validation_errors or [])
        merged = dict(context or {})
        if self.validation_errors:
            merged["validation_errors"] = self.validation_errors
        super().__init__(message, correlation_id=correlation_id, context=merged)


class NotFoundError(HealthyCoachingError, LookupError):
    """A referenced resource does not exist."""

    code = "NOT_FOUND"
    severity = Severity.LOW

    def __init__(
        self,
        resource: str,
        resource_id: str | None = None,
        *,
        correlation_id: str | None = None,
        context: dict[str, object] | None = None,
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        message = (
            f"{resource} with id '{resource_id}' not found"
            if resource_id
            else f"{resource} not found"
        )
        super().__init__(
            message,
            correlation_id=correlation_id,
            context={
                **(context or {}),
                "resource": resource,
                "resource_id": resource_id,
            },
        )


class InvalidPortionError(ValidationError):
    """Portion weight is not positive."""

    code = "INVALID_PORTION"

    def __init__(self, weight_g: float, *, correlation_id: str | None = None) -> None:
        self.weight_g = weight_g
        super().__init__(
            f"Portion weight must be positive, got {weight_g}",
            correlation_id=correlation_id,
            context={"weight_g": weight_g},
        )


class UnknownFoodError(NotFoundError):
    """A log entry references a food missing from the catalog."""

    code = "UNKNOWN_FOOD"

    def __init__(
        self,
        food_id: str,
        *,
        entry_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        self.food_id = food_id
        self.entry_id = entry_id
        super().__init__(
            "Food",
            food_id,
            correlation_id=correlation_id,
            context={"entry_id": entry_id} if entry_id else None,
        )


class InvalidPortionIndexError(ValidationError):
    """A portion index falls outside the food's portion list."""

    code = "INVALID_PORTION_INDEX"

    def __init__(
        self,
        food_id: str,
        portion_index: int,
        portion_count: int,
        *,
        entry_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        self.food_id = food_id
        self.portion_index = portion_index
        self.portion_count = portion_count
        context: dict[str, object] = {
            "food_id": food_id,
            "portion_index": portion_index,
            "portion_count": portion_count,
        }
        if entry_id:
            context["entry_id"] = entry_id
        super().__init__(
            f"Portion index {portion_index} out of range [0, {portion_count}) "
            f"for food '{food_id}'",
            correlation_id=correlation_id,
            context=context,
        )


class InvalidTargetError(ValidationError):
    """Daily calorie target is not positive."""

    code = "INVALID_TARGET"

    def __init__(
        self, target_calories: float, *, correlation_id: str | None = None
    ) -> None:
        self.target_calories = target_calories
        super().__init__(
            f"Calorie target must be positive, got {target_calories}",
            correlation_id=correlation_id,
            context={"target_calories": target_calories},
        )


class RepositoryError(HealthyCoachingError):
    """A persistence operation did not complete."""

    code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        repository: str,
        operation: str,
        entity_id: str | None = None,
        correlation_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.repository = repository
        self.operation = operation
        self.entity_id = entity_id
        super().__init__(
            message,
            correlation_id=correlation_id,
            context={
                "repository": repository,
                "operation": operation,
                "entity_id": entity_id,
            },
            cause=cause,
        )


class ConfigurationError(HealthyCoachingError):
    """Settings are missing or inconsistent."""

    code = "CONFIGURATION_ERROR"
    severity = Severity.HIGH

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        self.config_key = config_key
        super().__init__(
            message, correlation_id=correlation_id, context={"config_key": config_key}
        )
