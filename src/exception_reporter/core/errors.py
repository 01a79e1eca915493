"""Error types owned by exception_reporter.

ConfigurationError is the only error the notifier lets escape. The remaining
classes are host-neutral variants of the errors that are expected during
normal operation; each one declares the classification tag the ignore filter
matches on.
"""

from __future__ import annotations

from typing import Any, Optional

from exception_reporter.core import classification as tags


class ConfigurationError(ValueError):
    """Raised when the notifier is built with invalid settings."""


class AuthenticationError(Exception):
    classification_tags = (tags.AUTHENTICATION,)


class AuthorizationError(Exception):
    classification_tags = (tags.AUTHORIZATION,)


class HttpError(Exception):
    """An error that already maps to an HTTP status for the end user."""

    classification_tags = (tags.HTTP,)

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpResponseError(Exception):
    """Carries a fully built response that the host should return as-is."""

    classification_tags = (tags.HTTP_RESPONSE,)

    def __init__(self, response: Any, message: str = "") -> None:
        super().__init__(message)
        self.response = response


class NotFoundError(Exception):
    classification_tags = (tags.NOT_FOUND,)


class TokenMismatchError(Exception):
    classification_tags = (tags.TOKEN_MISMATCH,)


class ValidationError(Exception):
    classification_tags = (tags.VALIDATION,)

    def __init__(self, message: str = "", errors: Optional[dict] = None) -> None:
        super().__init__(message)
        self.errors = errors or {}


class SuspiciousOperationError(Exception):
    classification_tags = (tags.SUSPICIOUS_OPERATION,)
