"""Error handling module for xready.

This module defines error codes, exception classes, and the result model
that surfaces a fatal error to the composition pipeline.

Result Format:
{
    "severity": "SEVERITY_FATAL",
    "message": "cannot get observed composite resource from RunFunctionRequest: ..."
}

Usage:
    from xready.core.errors import ObservedCompositeMissingError

    # Raise with default message
    raise ObservedCompositeMissingError()

    # Convert to a pipeline result
    result = exc.to_result()
"""

from enum import Enum, StrEnum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes."""

    OBSERVED_COMPOSITE_MISSING = "OBSERVED_COMPOSITE_MISSING"
    OBSERVED_RESOURCES_MISSING = "OBSERVED_RESOURCES_MISSING"
    DESIRED_RESOURCES_MISSING = "DESIRED_RESOURCES_MISSING"
    CONDITION_FORMAT_INVALID = "CONDITION_FORMAT_INVALID"


class Severity(StrEnum):
    """Result severity understood by the composition pipeline."""

    FATAL = "SEVERITY_FATAL"


class Result(BaseModel):
    """One result entry of a function response."""

    severity: Severity
    message: str


class XReadyError(Exception):
    """Base exception for xready.

    All xready specific exceptions should inherit from this class.
    The function runner converts them into a fatal result.

    Attributes:
        code: The error code from ErrorCode enum
        message: Human-readable error message
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    def to_result(self) -> Result:
        """Convert exception to a fatal Result."""
        return Result(severity=Severity.FATAL, message=self.message)


class ObservedCompositeMissingError(XReadyError):
    """Request carries no observed composite resource."""

    def __init__(self, message: str = "observed composite resource is missing") -> None:
        super().__init__(ErrorCode.OBSERVED_COMPOSITE_MISSING, message)


class ObservedResourcesMissingError(XReadyError):
    """Request carries no observed composed resources mapping."""

    def __init__(self, message: str = "observed composed resources are missing") -> None:
        super().__init__(ErrorCode.OBSERVED_RESOURCES_MISSING, message)


class DesiredResourcesMissingError(XReadyError):
    """Request carries no desired composed resources mapping."""

    def __init__(self, message: str = "desired composed resources are missing") -> None:
        super().__init__(ErrorCode.DESIRED_RESOURCES_MISSING, message)


class ConditionFormatError(XReadyError):
    """A status condition entry could not be read.

    Never fatal: the aggregator treats the child as having no signal.
    """

    def __init__(self, message: str = "invalid condition format") -> None:
        super().__init__(ErrorCode.CONDITION_FORMAT_INVALID, message)
