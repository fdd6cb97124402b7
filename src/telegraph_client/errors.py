"""Exception hierarchy for the Telegraph client.

Every error raised by this package derives from TelegraphError, so callers can
catch the whole family at once. Nothing here is retried automatically.
"""

from typing import Any


class TelegraphError(Exception):
    """Base exception for all telegraph-client errors."""


class LengthError(TelegraphError, ValueError):
    """Raised when a short name is outside the allowed codepoint range."""

    def __init__(self, length: int, minimum: int, maximum: int) -> None:
        super().__init__(f"ShortName: unsupported length: want {minimum}-{maximum} characters, got {length}")
        self.length = length


class FormatError(TelegraphError, ValueError):
    """Raised when a textual short name token is not a JSON string."""

    def __init__(self, token: str | bytes, reason: str) -> None:
        super().__init__(f"ShortName: cannot unquote value {token!r}: {reason}")
        self.token = token


class EncodeError(TelegraphError):
    """Raised when page content cannot be serialized to its JSON tree."""


class APIError(TelegraphError):
    """Raised when the server answers with ``ok: false``."""

    def __init__(self, description: str, *, operation: str | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.operation = operation


class DecodeError(TelegraphError):
    """Raised when a response payload does not match the expected shape."""

    def __init__(self, operation: str, payload: Any, reason: str) -> None:
        super().__init__(f"{operation}: cannot decode response payload: {reason}")
        self.operation = operation
        self.payload = payload


class TransportError(TelegraphError):
    """Raised by transports when the HTTP exchange itself fails."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
