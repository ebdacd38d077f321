"""
Exception classes for tolgee-puller.

This module contains the error taxonomy shared by every pipeline stage. It
has no intra-package imports so that any module can depend on it without
creating import cycles.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors, used to pick the hint shown next to a failure."""

    NETWORK = "network"
    API = "api"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    PARSING = "parsing"
    UNKNOWN = "unknown"


CATEGORY_HINTS: dict[ErrorCategory, str] = {
    ErrorCategory.NETWORK: "Check the API url and your network connection.",
    ErrorCategory.API: "Check the API key and its access to the Tolgee project.",
    ErrorCategory.VALIDATION: "Check the requested languages against the Tolgee project.",
    ErrorCategory.CONFIGURATION: "Check the command-line flags and the TOLGEE_* environment.",
}


class TolgeePullerError(Exception):
    """Base exception class for tolgee-puller specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.user_message: str = user_message or message

    @property
    def hint(self) -> str | None:
        """Follow-up advice for the error's category, if there is any."""
        return CATEGORY_HINTS.get(self.category)


class ConfigurationError(TolgeePullerError):
    """Invalid or incomplete options, detected before any network activity."""

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            user_message=user_message,
        )


class NetworkError(TolgeePullerError):
    """Transport-level failures (connection refused, DNS, TLS, ...)."""

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.NETWORK,
            user_message=user_message,
        )


class HttpError(TolgeePullerError):
    """
    The Tolgee API answered with a non-success status code.

    The raw response body is kept as text; it is not guaranteed to be JSON.
    """

    def __init__(self, status_code: int, body: str, url: str | None = None) -> None:
        message = f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}"
        super().__init__(message, category=ErrorCategory.API)
        self.status_code: int = status_code
        self.body: str = body
        self.url: str | None = url


class MalformedResponseError(TolgeePullerError):
    """The HTTP call succeeded but the body does not have the expected shape."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message, category=ErrorCategory.API)
        self.body: str | None = body


class ArchiveError(MalformedResponseError):
    """The exported archive or one of its entries could not be read."""


class NonexistentLanguageError(TolgeePullerError):
    """One or more requested language tags are unknown to the Tolgee project."""

    def __init__(
        self, languages: Sequence[str], known_languages: Sequence[str] = ()
    ) -> None:
        self.languages: list[str] = list(languages)
        self.known_languages: list[str] = list(known_languages)
        message = (
            "Failed trying to fetch non-existing language(s): "
            f"{', '.join(self.languages)}."
        )
        if self.known_languages:
            message += f" Available languages: {', '.join(self.known_languages)}."
        super().__init__(message, category=ErrorCategory.VALIDATION)


class ParseError(TolgeePullerError):
    """An ICU message could not be parsed. Reported, never fatal."""

    def __init__(self, message: str, message_text: str, position: int) -> None:
        super().__init__(
            f"{message} (at position {position})", category=ErrorCategory.PARSING
        )
        self.message_text: str = message_text
        self.position: int = position
