"""
Shared utilities module.

This module contains the Result type for functional error handling together
with its exceptions, settings and logging helpers.
"""

from src.shared.exceptions import (
    AbsentPayloadError,
    AbsentResultError,
    ResultError,
    ResultStateError,
)
from src.shared.logging_config import configure_logging, get_logger
from src.shared.result import (
    Failure,
    Result,
    Success,
    all_,
    failure,
    of_nullable,
    of_nullable_get,
    of_optional,
    of_optional_get,
    of_throwable,
    partition,
    some,
    success,
)

__all__ = [
    "Success",
    "Failure",
    "Result",
    "success",
    "failure",
    "of_nullable",
    "of_nullable_get",
    "of_optional",
    "of_optional_get",
    "of_throwable",
    "partition",
    "all_",
    "some",
    "ResultError",
    "AbsentPayloadError",
    "AbsentResultError",
    "ResultStateError",
    "configure_logging",
    "get_logger",
]
