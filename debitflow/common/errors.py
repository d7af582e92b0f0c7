"""Error hierarchy surfaced to callers of the Direct Debit client.

Validation and malformed-intent errors are raised before any transport call;
transport errors come only from the API client. Callers can tell them apart
by type, and all of them expose `code`, `message` and `details`.
"""

from typing import Any


class DirectDebitError(Exception):
    """Base exception for every error raised by this package."""

    def __init__(self, code: int, message: str, details: dict[str, Any] | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to an error response shape."""
        return {
            "error_type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DirectDebitError):
    """Required properties were missing from the intent.

    `missing` holds the property names in schema declaration order.
    """

    def __init__(self, code: int, message: str, missing: tuple[str, ...]):
        super().__init__(code, message, {"missing": list(missing)})
        self.missing = missing


class MalformedIntentError(DirectDebitError):
    """Intent shape cannot be mapped to any schema.

    Examples:
    - no ach/eft/bacs key supplied
    - sub-method value is not a mapping
    - unknown operation kind or sub-method
    """


class TransportError(DirectDebitError):
    """API call failed; `code` is the HTTP status, or 0 when no response arrived."""
