"""Prometheus metrics definitions for function runs."""

from prometheus_client import Counter, Histogram

# =============================================================================
# Histogram Buckets
# =============================================================================
# FAST: CPU-only computation (0.5ms ~ 5s), log scale ratio ≈ 2.15
_BUCKETS_FAST = (
    0.0005, 0.001, 0.002, 0.005, 0.01,
    0.02, 0.05, 0.1, 0.2, 0.5,
    1, 2, 5,
)  # 13 buckets

# =============================================================================
# Function Run Metrics
# =============================================================================
# outcome: available | reconcile_error | fatal

XREADY_RUNS_TOTAL = Counter(
    "xready_runs_total",
    "Function runs by outcome",
    ["outcome"],
)

XREADY_RUN_DURATION = Histogram(
    "xready_run_duration_seconds",
    "Function run duration",
    buckets=_BUCKETS_FAST,
)

# =============================================================================
# Composed Resource Metrics
# =============================================================================
# result: ChildResult values (bounded)

XREADY_CHILDREN_EVALUATED_TOTAL = Counter(
    "xready_children_evaluated_total",
    "Desired composed resources evaluated, by result",
    ["result"],
)

XREADY_CHILDREN_MARKED_READY_TOTAL = Counter(
    "xready_children_marked_ready_total",
    "Composed resources whose readiness was set to READY_TRUE",
)
