"""Function runner: request → readiness aggregation → response.

Decoding failures become a single fatal result; everything past decoding
is handled by the aggregator, which never fails on composed resource data.
"""

import logging
import time
from datetime import datetime

from xready.app.config import Settings, get_settings
from xready.app.logging import clear_trace_context, set_composite_context, set_trace_id
from xready.app.metrics.collector import (
    XREADY_CHILDREN_EVALUATED_TOTAL,
    XREADY_CHILDREN_MARKED_READY_TOTAL,
    XREADY_RUN_DURATION,
    XREADY_RUNS_TOTAL,
)
from xready.control.aggregator import EvaluateOutput, evaluate
from xready.core.domain.conditions import ConditionStatus, Readiness
from xready.core.errors import XReadyError
from xready.core.logging_schema import LogEvent
from xready.core.models.function import RunFunctionRequest, RunFunctionResponse
from xready.core.models.resource import DesiredChild
from xready.function import request, response

logger = logging.getLogger(__name__)


def run_function(
    req: RunFunctionRequest,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> RunFunctionResponse:
    """Run the function for one request.

    Args:
        req: Decoded function request
        now: Evaluation time (defaults to current UTC time)
        settings: Settings override (defaults to get_settings())

    Returns:
        Response with updated desired state, or a fatal result
    """
    settings = settings or get_settings()
    set_trace_id(req.meta.tag or None)
    try:
        return _run(req, now, settings)
    finally:
        clear_trace_context()


def _run(
    req: RunFunctionRequest, now: datetime | None, settings: Settings
) -> RunFunctionResponse:
    start = time.monotonic()
    logger.info("Running function", extra={"event": LogEvent.RUN_STARTED, "tag": req.meta.tag})

    rsp = response.to(req, settings.function.response_ttl_seconds)

    try:
        oxr = request.get_observed_composite_resource(req)
        observed = request.get_observed_composed_resources(req)
        desired = request.get_desired_composed_resources(req)
        xr = request.get_desired_composite_resource(req)
    except XReadyError as exc:
        logger.error(
            "Cannot decode request",
            extra={
                "event": LogEvent.RUN_FATAL,
                "error_code": exc.code.value,
                "error": exc.message,
            },
        )
        response.fatal(rsp, exc)
        _observe_run(settings, "fatal", start)
        return rsp

    set_composite_context(oxr.api_version, oxr.kind, oxr.name)
    log_extra = {
        "xr_apiversion": oxr.api_version,
        "xr_kind": oxr.kind,
        "xr_name": oxr.name,
    }
    logger.debug("Found desired resources", extra={**log_extra, "count": len(desired)})

    output = evaluate(
        oxr,
        observed,
        desired,
        now=now,
        condition_type=settings.function.condition_type,
    )

    response.set_desired_composed_resources(rsp, output.desired)
    xr.set_conditions(output.condition)
    response.set_desired_composite_resource(rsp, xr)

    outcome = (
        "available" if output.condition.status == ConditionStatus.TRUE else "reconcile_error"
    )
    _observe_run(settings, outcome, start, output, desired)

    duration_ms = (time.monotonic() - start) * 1000
    extra = {
        **log_extra,
        "outcome": outcome,
        "unready_count": len(output.fragments),
        "duration_ms": duration_ms,
    }
    if duration_ms > settings.logging.slow_threshold_ms:
        logger.warning("Function run slow", extra={**extra, "event": LogEvent.RUN_SLOW})
    else:
        logger.info("Function run complete", extra={**extra, "event": LogEvent.RUN_COMPLETE})

    return rsp


def _observe_run(
    settings: Settings,
    outcome: str,
    start: float,
    output: EvaluateOutput | None = None,
    desired: dict[str, DesiredChild] | None = None,
) -> None:
    if not settings.metrics.enabled:
        return

    XREADY_RUNS_TOTAL.labels(outcome=outcome).inc()
    XREADY_RUN_DURATION.observe(time.monotonic() - start)

    if output is None or desired is None:
        return
    for name, result in output.results.items():
        XREADY_CHILDREN_EVALUATED_TOTAL.labels(result=result.value).inc()
        if desired[name].ready != Readiness.TRUE and output.desired[name].ready == Readiness.TRUE:
            XREADY_CHILDREN_MARKED_READY_TOTAL.inc()
