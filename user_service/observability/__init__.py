"""Observability package for the user service."""

from user_service.observability.metrics import (
    record_operation,
    increment_notification_failure,
    get_metrics_content,
    MetricsOutcome,
)

__all__ = [
    "record_operation",
    "increment_notification_failure",
    "get_metrics_content",
    "MetricsOutcome",
]
