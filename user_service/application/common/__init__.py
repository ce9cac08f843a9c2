"""Shared application-layer building blocks."""

from user_service.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)
from user_service.application.common.result import Err, ErrorKind, Ok, Result

__all__ = [
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "Err",
    "ErrorKind",
    "Ok",
    "Result",
]
