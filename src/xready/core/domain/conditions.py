"""Status condition types (K8s pattern).

Conditions arrive as loosely typed maps inside observed resources.
``Condition.from_dict`` reads them with partial-success semantics:
optional fields fall back to "", a missing or mistyped ``status``
raises ConditionFormatError.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from xready.core.errors import ConditionFormatError


class ConditionStatus(StrEnum):
    """Condition status values (K8s convention: strings, not booleans)."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionType(StrEnum):
    READY = "Ready"
    NO_ERRORS = "NoErrors"


class ConditionReason(StrEnum):
    """Reasons this function reads or writes."""

    AVAILABLE = "Available"
    CREATING = "Creating"
    RECONCILE_ERROR = "ReconcileError"


class Readiness(StrEnum):
    """Readiness flag of a desired composed resource."""

    UNSPECIFIED = "READY_UNSPECIFIED"
    TRUE = "READY_TRUE"
    FALSE = "READY_FALSE"


class Condition(BaseModel):
    """A single status condition.

    status is kept as the raw string so that unexpected values
    still disqualify a resource instead of failing validation.
    """

    type: str = ""
    status: str
    reason: str = ""
    message: str = ""
    last_transition_time: datetime | None = None

    model_config = {"frozen": True}

    def is_true(self) -> bool:
        """Check if condition status is True."""
        return self.status == ConditionStatus.TRUE

    def is_creating(self) -> bool:
        """Ready condition of a resource that is still being created."""
        return self.type == ConditionType.READY and self.reason == ConditionReason.CREATING

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire form (camelCase, RFC 3339 timestamp)."""
        data: dict[str, Any] = {
            "type": self.type,
            "status": self.status,
            "reason": self.reason,
            "message": self.message,
        }
        if self.last_transition_time is not None:
            data["lastTransitionTime"] = _to_utc(self.last_transition_time).isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Condition":
        """Create from an unstructured condition entry.

        Raises:
            ConditionFormatError: entry is not a map or has no string status.
        """
        if not isinstance(data, Mapping):
            raise ConditionFormatError(f"condition is {type(data).__name__}, not a map")

        status = data.get("status")
        if not isinstance(status, str):
            raise ConditionFormatError("condition status is missing or not a string")

        return cls(
            type=_str_or_empty(data.get("type")),
            status=status,
            reason=_str_or_empty(data.get("reason")),
            message=_str_or_empty(data.get("message")),
            last_transition_time=_parse_time(data.get("lastTransitionTime")),
        )


def _str_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_utc(value: datetime) -> datetime:
    # Naive times are taken as UTC so the rendered value always carries an offset
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _parse_time(value: Any) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
