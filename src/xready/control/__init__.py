"""Control logic - readiness aggregation over composed resources."""

from xready.control.aggregator import (
    ChildResult,
    ChildVerdict,
    EvaluateOutput,
    build_condition,
    evaluate,
    evaluate_child,
    format_fragment,
)

__all__ = [
    "ChildResult",
    "ChildVerdict",
    "EvaluateOutput",
    "build_condition",
    "evaluate",
    "evaluate_child",
    "format_fragment",
]
