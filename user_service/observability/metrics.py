"""
Prometheus Metrics for the user service.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Counter: Value only goes up (operations by outcome, notification failures)
"""

from prometheus_client import (
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
USER_OPERATIONS_TOTAL = Counter(
    "user_operations_total",
    "Total number of user operations by outcome",
    ["operation", "outcome"],
)

NOTIFICATION_FAILURES_TOTAL = Counter(
    "user_event_notification_failures_total",
    "Total number of user event notifications that could not be delivered",
    ["event_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsOutcome:
    """Outcome labels for user_operations_total. Error outcomes use the ErrorKind value."""

    OK = "ok"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def record_operation(operation: str, outcome: str):
    """Call once per handler execution with the final outcome."""
    USER_OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()


def increment_notification_failure(event_type: str):
    """Call when a notifier raised or a background delivery failed."""
    NOTIFICATION_FAILURES_TOTAL.labels(event_type=event_type).inc()


def get_metrics_content() -> tuple[bytes, str]:
    """Return the metrics payload and its content type for the /metrics endpoint."""
    return generate_latest(), CONTENT_TYPE_LATEST
