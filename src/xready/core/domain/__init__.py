"""Domain models and enums."""

from xready.core.domain.conditions import (
    Condition,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    Readiness,
)

__all__ = [
    "Condition",
    "ConditionReason",
    "ConditionStatus",
    "ConditionType",
    "Readiness",
]
