"""Error taxonomy for import, export and pricing operations.

Operation-level errors (``InputError``, ``StoreError``,
``AuthorizationError``) abort the whole operation and surface a single
message. ``RecordValidationError`` marks one bad record inside a batch;
batch loops catch it, count it and carry on.
"""

from __future__ import annotations


class InterchangeError(Exception):
    """Base class for errors reported to callers.

    Attributes:
        message: Human-readable message returned to the caller.
    """

    error_type: str = "error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InputError(InterchangeError):
    """Missing or empty required input."""

    error_type = "input"


class RecordValidationError(InterchangeError):
    """A single row or record failed its required-field checks.

    Attributes:
        row: The offending row, when available.
    """

    error_type = "record_validation"

    def __init__(self, message: str, row: dict[str, str] | None = None) -> None:
        self.row = row
        super().__init__(message)


class StoreError(InterchangeError):
    """Read or write failure in the external store."""

    error_type = "store"


class AuthorizationError(InterchangeError):
    """Caller is not authenticated, or lacks the required role.

    Attributes:
        status_code: 401 when credentials are missing or invalid, 403 when
            the caller is known but not permitted.
    """

    error_type = "authorization"

    def __init__(self, message: str, status_code: int = 403) -> None:
        self.status_code = status_code
        super().__init__(message)
