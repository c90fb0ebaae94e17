"""Result type for functional error handling.

This module implements a Result type that makes the outcome of an operation
explicit in type signatures without relying on exceptions for control flow.
A Result is either a ``Success`` carrying a value or a ``Failure`` carrying an
error, never both and never neither. Neither payload may be ``None``.

Each variant implements the whole combinator surface for its own branch, so
no operation needs to inspect a tag:

    port = of_nullable(env.get("PORT"), "PORT not set").and_result_of(int).or_else(8080)

Equality is deliberately asymmetric: two successes compare by payload, while
a failure is only ever equal to itself.
"""

import logging
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from src.shared.config import Settings, get_settings
from src.shared.exceptions import AbsentPayloadError, AbsentResultError, ResultStateError

logger = logging.getLogger(__name__)

S = TypeVar("S")  # Success type
F = TypeVar("F")  # Failure type
S2 = TypeVar("S2")  # Mapped success type
F2 = TypeVar("F2")  # Mapped failure type
X = TypeVar("X", bound=BaseException)


def _ensure_result(candidate: Any, operation: str) -> "Result[Any, Any]":
    if not isinstance(candidate, (Success, Failure)):
        raise TypeError(
            f"{operation} must produce a Success or Failure, got {type(candidate).__name__}"
        )
    return candidate


@dataclass(frozen=True, eq=False)
class Success(Generic[S]):
    """Successful result containing a value."""

    value: S

    def __post_init__(self) -> None:
        if self.value is None:
            raise AbsentPayloadError("Success")

    # Queries

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return False

    def get_success_unchecked(self) -> S:
        """Get the value (safe because this is Success)."""
        return self.value

    def get_failure_unchecked(self) -> Any:
        """Always raises: a Success has no error payload."""
        raise ResultStateError(
            "get_failure_unchecked() cannot be called on a Success", "Success"
        )

    # Inspection

    def if_success(self, effect: Callable[[S], Any]) -> "Success[S]":
        """Run effect on the value and return self."""
        effect(self.value)
        return self

    def if_failure(self, effect: Callable[[Any], Any]) -> "Success[S]":
        """Return self (effect is not run because this is Success)."""
        return self

    # Combinators

    def filter(self, predicate: Callable[[S], bool], on_fail: F) -> "Result[S, F]":
        """Keep this success if predicate holds, otherwise fail with on_fail."""
        return self if predicate(self.value) else Failure(on_fail)

    def filter_get(
        self, predicate: Callable[[S], bool], on_fail: Callable[[], F]
    ) -> "Result[S, F]":
        """Like filter, but on_fail is only called when predicate rejects the value."""
        return self if predicate(self.value) else Failure(on_fail())

    def and_(self, mapper: Callable[[S], "Result[S2, F]"]) -> "Result[S2, F]":
        """Chain a fallible step (monadic bind)."""
        return _ensure_result(mapper(self.value), "and_() mapper")

    def and_result_of(self, mapper: Callable[[S], S2]) -> "Result[S2, Any]":
        """Transform the success value."""
        return Success(mapper(self.value))

    def map_failure(self, mapper: Callable[[Any], F2]) -> "Result[S, F2]":
        """Transform the error (keeps the value because this is Success)."""
        return Success(self.value)

    def map_both(
        self, success_mapper: Callable[[S], S2], failure_mapper: Callable[[Any], F2]
    ) -> "Result[S2, F2]":
        """Transform whichever payload is present (the value, because this is Success)."""
        return Success(success_mapper(self.value))

    def or_(self, alternative: "Result[S, F]") -> "Result[S, F]":
        """Return self; the alternative is ignored."""
        return self

    def or_get(self, supplier: Callable[[], "Result[S, F]"]) -> "Result[S, F]":
        """Return self; supplier is never called."""
        return self

    # Terminal operations

    def or_else(self, default: S) -> S:
        """Get the value or default (returns value because this is Success)."""
        return self.value

    def or_else_get(self, supplier: Callable[[], S]) -> S:
        """Get the value or supplier() (returns value; supplier is never called)."""
        return self.value

    def or_else_absent(self) -> Optional[S]:
        """Get the value or None (returns value because this is Success)."""
        return self.value

    def or_else_raise(self, error_mapper: Callable[[Any], X]) -> S:
        """Get the value; error_mapper is never called on a Success."""
        return self.value

    def to_set(self) -> frozenset[S]:
        """Get a one-element frozenset holding the value.

        Raises:
            TypeError: If the value is not hashable (e.g. the list carried by
                a Success from ``all_`` or ``some``)
        """
        try:
            return frozenset((self.value,))
        except TypeError as e:
            raise TypeError(
                f"to_set() requires a hashable payload, got {type(self.value).__name__}"
            ) from e

    def to_optional(self) -> Optional[S]:
        """Get the value as an Optional (the value because this is Success)."""
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self.value == other.value
        if isinstance(other, Failure):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, eq=False)
class Failure(Generic[F]):
    """Failure result containing an error payload.

    A Failure is equal only to itself and hashes by identity, so two failures
    with equal payloads are still distinct values.
    """

    error: F

    def __post_init__(self) -> None:
        if self.error is None:
            raise AbsentPayloadError("Failure")

    # Queries

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return True

    def get_success_unchecked(self) -> Any:
        """Always raises: a Failure has no success payload."""
        raise ResultStateError(
            "get_success_unchecked() cannot be called on a Failure", "Failure"
        )

    def get_failure_unchecked(self) -> F:
        """Get the error (safe because this is Failure)."""
        return self.error

    # Inspection

    def if_success(self, effect: Callable[[Any], Any]) -> "Failure[F]":
        """Return self (effect is not run because this is Failure)."""
        return self

    def if_failure(self, effect: Callable[[F], Any]) -> "Failure[F]":
        """Run effect on the error and return self."""
        effect(self.error)
        return self

    # Combinators

    def filter(self, predicate: Callable[[Any], bool], on_fail: F) -> "Result[Any, F]":
        """Pass the error through (predicate is not checked because this is Failure)."""
        return Failure(self.error)

    def filter_get(
        self, predicate: Callable[[Any], bool], on_fail: Callable[[], F]
    ) -> "Result[Any, F]":
        """Pass the error through (on_fail is never called because this is Failure)."""
        return Failure(self.error)

    def and_(self, mapper: Callable[[Any], "Result[S2, F]"]) -> "Result[S2, F]":
        """Chain a fallible step (does nothing for Failure)."""
        return Failure(self.error)

    def and_result_of(self, mapper: Callable[[Any], S2]) -> "Result[S2, F]":
        """Transform the success value (does nothing for Failure)."""
        return Failure(self.error)

    def map_failure(self, mapper: Callable[[F], F2]) -> "Result[Any, F2]":
        """Transform the error payload."""
        return Failure(mapper(self.error))

    def map_both(
        self, success_mapper: Callable[[Any], S2], failure_mapper: Callable[[F], F2]
    ) -> "Result[S2, F2]":
        """Transform whichever payload is present (the error, because this is Failure)."""
        return Failure(failure_mapper(self.error))

    def or_(self, alternative: "Result[S, F2]") -> "Result[S, F2]":
        """Discard this failure and adopt the alternative."""
        return _ensure_result(alternative, "or_() alternative")

    def or_get(self, supplier: Callable[[], "Result[S, F2]"]) -> "Result[S, F2]":
        """Discard this failure and adopt the supplied alternative."""
        return _ensure_result(supplier(), "or_get() supplier")

    # Terminal operations

    def or_else(self, default: S) -> S:
        """Get the value or default (returns default because this is Failure)."""
        return default

    def or_else_get(self, supplier: Callable[[], S]) -> S:
        """Get the value or supplier() (calls supplier because this is Failure)."""
        return supplier()

    def or_else_absent(self) -> None:
        """Get the value or None (returns None because this is Failure)."""
        return None

    def or_else_raise(self, error_mapper: Callable[[F], X]) -> Any:
        """Raise the exception built by error_mapper from the error payload."""
        raise error_mapper(self.error)

    def to_set(self) -> frozenset[Any]:
        """Get an empty frozenset (no value because this is Failure)."""
        return frozenset()

    def to_optional(self) -> None:
        """Get the value as an Optional (None because this is Failure)."""
        return None

    def __eq__(self, other: object) -> bool:
        # Never equal by value, not even to another Failure with the same error.
        return self is other

    def __hash__(self) -> int:
        return object.__hash__(self)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for clearer function signatures
Result = Union[Success[S], Failure[F]]


# Construction


def success(value: S) -> Success[S]:
    """Create a Success. Raises AbsentPayloadError if value is None."""
    return Success(value)


def failure(error: F) -> Failure[F]:
    """Create a Failure. Raises AbsentPayloadError if error is None."""
    return Failure(error)


def of_nullable(candidate: Optional[S], if_absent: F) -> Result[S, F]:
    """Wrap candidate as Success, or fail with if_absent when it is None."""
    return of_nullable_get(candidate, lambda: if_absent)


def of_nullable_get(candidate: Optional[S], if_absent: Callable[[], F]) -> Result[S, F]:
    """Wrap candidate as Success, or fail with if_absent() when it is None."""
    if candidate is not None:
        return Success(candidate)
    return Failure(if_absent())


def of_optional(optional: Collection[S], if_empty: F) -> Result[S, F]:
    """Convert a zero-or-one element collection into a Result.

    Args:
        optional: Empty collection, or a collection holding exactly one
            element (e.g. ``[]``, ``(value,)`` or the set from ``to_set()``)
        if_empty: Failure payload used when the collection is empty

    Raises:
        ValueError: If the collection holds more than one element
    """
    return of_optional_get(optional, lambda: if_empty)


def of_optional_get(optional: Collection[S], if_empty: Callable[[], F]) -> Result[S, F]:
    """Like of_optional, but if_empty is only called when the collection is empty."""
    if len(optional) > 1:
        raise ValueError(f"optional must hold at most one element, got {len(optional)}")
    for element in optional:
        return Success(element)
    return Failure(if_empty())


def of_throwable(
    action: Callable[[], S],
    map_error: Optional[Callable[[Exception], F]] = None,
) -> Result[S, Any]:
    """Run a fallible action and capture its outcome as a Result.

    A returned value becomes a Success. A raised exception becomes a Failure
    carrying that exception. A ``None`` return becomes a Failure carrying
    ``AbsentResultError``. Exceptions that do not derive from ``Exception``
    (KeyboardInterrupt, SystemExit) are not captured.

    Args:
        action: Zero-argument callable to run
        map_error: Optional mapper turning the captured exception into a
            custom failure payload

    Returns:
        Success with the action's value, or Failure with the (mapped) error

    Example:
        >>> of_throwable(lambda: 10 / 0)
        Failure(ZeroDivisionError('division by zero'))
    """
    try:
        value = action()
    except Exception as e:
        captured: Exception = e
    else:
        if value is not None:
            return Success(value)
        captured = AbsentResultError("action returned None")

    _log_captured(action, captured)
    return Failure(captured if map_error is None else map_error(captured))


def _capture_settings() -> Settings:
    """Resolve settings for capture logging, falling back to defaults when invalid."""
    try:
        return get_settings()
    except ValidationError as e:
        logger.warning(f"Ignoring invalid RESULT_* settings, using defaults: {e}")
        return Settings.model_construct()


def _log_captured(action: Callable[..., Any], error: Exception) -> None:
    settings = _capture_settings()
    if not settings.log_captured_exceptions:
        return

    name = getattr(action, "__qualname__", repr(action))
    logger.debug(
        f"{name} captured {type(error).__name__}: {error}",
        exc_info=error if settings.log_tracebacks else None,
    )


# Aggregation


def partition(
    results: Iterable[Result[S, F]],
    decide: Callable[[list[S], list[F]], Result[list[S], list[F]]],
) -> Result[list[S], list[F]]:
    """Split results into ordered successes and failures, then let decide pick.

    The scan is a single pass; ``decide`` receives both lists and returns the
    aggregate Result. ``all_`` and ``some`` are two such policies.
    """
    successes: list[S] = []
    failures: list[F] = []
    for result in results:
        result.if_success(successes.append).if_failure(failures.append)
    return _ensure_result(decide(successes, failures), "partition() decide")


def all_(results: Iterable[Result[S, F]]) -> Result[list[S], list[F]]:
    """Succeed with every value if all results succeed, else fail with every error."""
    return partition(results, lambda s, f: Failure(f) if f else Success(s))


def some(results: Iterable[Result[S, F]]) -> Result[list[S], list[F]]:
    """Succeed with the values found if at least one result succeeds, else fail with every error."""
    return partition(results, lambda s, f: Success(s) if s else Failure(f))
