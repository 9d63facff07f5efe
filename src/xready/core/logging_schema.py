"""Logging field schema - v1.0

Standard fields (added to all JSON logs):
- schema_version: Log schema version
- service: Service name (xready)
- event: Event type (run_complete, child_unready, etc.)
- trace_id: Run correlation ID (request meta tag)
- duration_ms: Duration in milliseconds

High cardinality fields (OK in logs, NOT in metric labels):
- xr_apiversion / xr_kind / xr_name: Composite resource identity
- composed_resource_name: Composed resource name
"""

from enum import StrEnum


class LogEvent(StrEnum):
    """Standard log event types.

    Use these event types in the 'event' extra field for consistent
    log filtering and analysis.
    """

    # Function runner events
    RUN_STARTED = "run_started"
    RUN_COMPLETE = "run_complete"
    RUN_SLOW = "run_slow"
    RUN_FATAL = "run_fatal"

    # Aggregator events
    CHILD_SKIPPED = "child_skipped"
    CHILD_CREATING = "child_creating"
    CHILD_UNREADY = "child_unready"
    CHILD_READY = "child_ready"
    CONDITION_INVALID = "condition_invalid"
    COMPOSITE_CONDITION_SET = "composite_condition_set"
