"""Readiness aggregation over observed composed resources.

Algorithm (per desired composed resource, sorted by name):
1. Not observed yet → skip
2. No readable status.conditions list → skip
3. Walk conditions in order, stop at the first of:
   - unreadable entry → skip (no signal)
   - Ready/Creating → no error (resource is still being created)
   - status != True → one error fragment for this resource
4. All conditions True (at least one) → mark READY_TRUE if readiness is unspecified

Any fragment turns the composite's NoErrors condition False/ReconcileError
with every fragment in its message. Pure function: no I/O, inputs are not mutated.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from xready.core.domain.conditions import (
    Condition,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    Readiness,
)
from xready.core.errors import ConditionFormatError
from xready.core.logging_schema import LogEvent
from xready.core.models.resource import CompositeResource, DesiredChild, ObservedChild

logger = logging.getLogger(__name__)

UNREADY_MESSAGE_HEADER = "Unready conditions:\n"


class ChildResult(StrEnum):
    """Outcome of evaluating one composed resource."""

    NOT_OBSERVED = "not_observed"
    NO_CONDITIONS = "no_conditions"
    INVALID = "invalid"
    CREATING = "creating"
    UNREADY = "unready"
    READY = "ready"


class ChildVerdict(BaseModel):
    """Evaluation of a single composed resource.

    Attributes:
        name: Composed resource name
        result: Outcome
        fragment: Error fragment, only for UNREADY
    """

    name: str
    result: ChildResult
    fragment: str | None = None

    model_config = {"frozen": True}


class EvaluateOutput(BaseModel):
    """Aggregator output.

    Attributes:
        desired: Desired composed resources with updated readiness
        condition: Synthesized composite condition
        fragments: Collected error fragments, in evaluation order
        results: Outcome per evaluated desired resource
    """

    desired: dict[str, DesiredChild]
    condition: Condition
    fragments: tuple[str, ...] = ()
    results: dict[str, ChildResult] = {}

    model_config = {"frozen": True}


def format_fragment(name: str, condition: Condition) -> str:
    """Render one unready condition for the composite message."""
    return (
        f"\n=> {name} {condition.type}={condition.status} {condition.reason}"
        f"\n\n{condition.message}"
    )


def evaluate_child(
    child: ObservedChild, log_extra: Mapping[str, Any] | None = None
) -> ChildVerdict:
    """Evaluate the status conditions of one observed composed resource.

    Only the first disqualifying condition is reported.
    """
    extra = dict(log_extra or {})

    try:
        raw, found = child.raw_conditions()
    except ValueError as exc:
        logger.debug(
            "Error getting conditions",
            extra={**extra, "event": LogEvent.CHILD_SKIPPED, "error": str(exc)},
        )
        return ChildVerdict(name=child.name, result=ChildResult.NO_CONDITIONS)
    if not found or not raw:
        logger.debug(
            "No conditions found in resource",
            extra={**extra, "event": LogEvent.CHILD_SKIPPED},
        )
        return ChildVerdict(name=child.name, result=ChildResult.NO_CONDITIONS)

    for entry in raw:
        try:
            condition = Condition.from_dict(entry)
        except ConditionFormatError as exc:
            logger.debug(
                "Invalid condition format",
                extra={**extra, "event": LogEvent.CONDITION_INVALID, "error": exc.message},
            )
            return ChildVerdict(name=child.name, result=ChildResult.INVALID)

        if condition.is_creating():
            logger.info(
                "Resource is in creating state, skipping Ready condition check",
                extra={**extra, "event": LogEvent.CHILD_CREATING},
            )
            return ChildVerdict(name=child.name, result=ChildResult.CREATING)

        if not condition.is_true():
            logger.info(
                "Found condition that is not True",
                extra={
                    **extra,
                    "event": LogEvent.CHILD_UNREADY,
                    "condition": condition.type,
                    "status": condition.status,
                    "reason": condition.reason,
                },
            )
            return ChildVerdict(
                name=child.name,
                result=ChildResult.UNREADY,
                fragment=format_fragment(child.name, condition),
            )

    return ChildVerdict(name=child.name, result=ChildResult.READY)


def build_condition(
    fragments: list[str] | tuple[str, ...],
    now: datetime,
    condition_type: str = ConditionType.NO_ERRORS,
) -> Condition:
    """Synthesize the composite condition from collected fragments."""
    if not fragments:
        return Condition(
            type=condition_type,
            status=ConditionStatus.TRUE,
            reason=ConditionReason.AVAILABLE,
            message="",
            last_transition_time=now,
        )

    return Condition(
        type=condition_type,
        status=ConditionStatus.FALSE,
        reason=ConditionReason.RECONCILE_ERROR,
        message=UNREADY_MESSAGE_HEADER + "\n".join(fragments),
        last_transition_time=now,
    )


def evaluate(
    parent: CompositeResource,
    observed: Mapping[str, ObservedChild],
    desired: Mapping[str, DesiredChild],
    now: datetime | None = None,
    condition_type: str = ConditionType.NO_ERRORS,
) -> EvaluateOutput:
    """Aggregate composed resource conditions into the composite condition.

    Args:
        parent: Composite resource (used for log correlation only)
        observed: Observed composed resources by name
        desired: Desired composed resources by name
        now: Evaluation time for lastTransitionTime (defaults to current UTC time)
        condition_type: Type of the synthesized condition

    Returns:
        EvaluateOutput with updated desired resources and the composite condition
    """
    now = now or datetime.now(UTC)
    log_extra = {
        "xr_apiversion": parent.api_version,
        "xr_kind": parent.kind,
        "xr_name": parent.name,
    }

    fragments: list[str] = []
    results: dict[str, ChildResult] = {}
    updated: dict[str, DesiredChild] = {}

    for name in sorted(desired):
        child = desired[name]
        extra = {**log_extra, "composed_resource_name": name}

        observed_child = observed.get(name)
        if observed_child is None:
            logger.debug(
                "Ignoring desired resource that does not appear in observed resources",
                extra={**extra, "event": LogEvent.CHILD_SKIPPED},
            )
            results[name] = ChildResult.NOT_OBSERVED
            updated[name] = child
            continue

        verdict = evaluate_child(observed_child, extra)
        results[name] = verdict.result
        if verdict.fragment is not None:
            fragments.append(verdict.fragment)

        if verdict.result == ChildResult.READY and child.ready == Readiness.UNSPECIFIED:
            logger.info(
                "Automatically determined that composed resource is ready",
                extra={**extra, "event": LogEvent.CHILD_READY},
            )
            child = child.model_copy(update={"ready": Readiness.TRUE})
        updated[name] = child

    condition = build_condition(fragments, now, condition_type)
    logger.info(
        "Setting condition for XR composite condition",
        extra={
            **log_extra,
            "event": LogEvent.COMPOSITE_CONDITION_SET,
            "status": condition.status,
            "reason": condition.reason,
            "unready_count": len(fragments),
        },
    )

    return EvaluateOutput(
        desired={name: updated[name] for name in desired},
        condition=condition,
        fragments=tuple(fragments),
        results=results,
    )
