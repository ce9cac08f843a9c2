"""
Result type returned by every user handler.

    result = await handler.execute(command)
    if isinstance(result, Err):
        ...  # result.kind tells the caller what went wrong
    user = result.value

Handlers return Err for every expected failure so callers can branch on
``ErrorKind`` instead of catching exceptions or matching message text.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from user_service.observability.metrics import MetricsOutcome, record_operation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    DUPLICATE_EMAIL = "duplicate_email"
    EMAIL_TAKEN = "email_taken"
    PERSISTENCE_FAILURE = "persistence_failure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    cause: Optional[BaseException] = None

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def ok(operation: str, value: T) -> Ok[T]:
    record_operation(operation, MetricsOutcome.OK)
    return Ok(value)


def err(operation: str, kind: ErrorKind, message: str) -> Err:
    logger.info("%s rejected (%s): %s", operation, kind.value, message)
    record_operation(operation, kind.value)
    return Err(kind=kind, message=message)


def persistence_failure(operation: str, target: str, exc: BaseException) -> Err:
    """Wrap an unexpected store failure, keeping the original exception as cause."""
    logger.error("%s failed for %s: %s", operation, target, exc, exc_info=exc)
    record_operation(operation, ErrorKind.PERSISTENCE_FAILURE.value)
    return Err(
        kind=ErrorKind.PERSISTENCE_FAILURE,
        message=f"{operation} failed for {target}",
        cause=exc,
    )
