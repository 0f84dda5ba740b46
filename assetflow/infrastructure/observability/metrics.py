"""Prometheus metrics for projection volume, previews and rejected policies"""

from prometheus_client import Counter, Histogram

projection_counter = Counter(
    "assetflow_projection_total",
    "Total cash-flow projections computed",
    ["outcome"],  # saving | overspending
)

occurrence_preview_counter = Counter(
    "assetflow_occurrence_preview_total",
    "Occurrence previews served",
    ["frequency"],
)

rejected_policy_counter = Counter(
    "assetflow_rejected_policy_total",
    "Recurring records rejected by policy validation",
    ["error_type"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(final_savings: float) -> None:
    """Record whether the horizon ends with positive savings"""
    outcome = "saving" if final_savings >= 0 else "overspending"
    projection_counter.labels(outcome=outcome).inc()


def record_rejected_policy(error: Exception) -> None:
    rejected_policy_counter.labels(error_type=type(error).__name__).inc()
