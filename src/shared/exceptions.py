"""Exceptions raised by the Result type.

These represent programmer errors (misuse of the API), not represented
failures. Represented failures travel as ``Failure`` payloads.
"""


class ResultError(Exception):
    """Base exception for all Result usage errors."""
    pass


class AbsentPayloadError(ResultError, ValueError):
    """Raised when a Success or Failure is constructed around None."""

    def __init__(self, variant: str):
        super().__init__(f"{variant} payload must not be None")
        self.variant = variant


class ResultStateError(ResultError, RuntimeError):
    """Raised when a payload is extracted from the wrong variant."""

    def __init__(self, message: str, variant: str):
        super().__init__(message)
        self.variant = variant


class AbsentResultError(ResultError):
    """Failure payload used by of_throwable when the action returns None."""
    pass
