"""Unwrap the API's success/error envelope into typed results."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from loguru import logger

from telegraph_client.errors import APIError, DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Envelope:
    """The uniform wrapper around every response: ``{"ok", "error", "result"}``."""

    ok: bool
    error: str | None = None
    result: Any = None

    @classmethod
    def from_dict(cls, data: Any, *, operation: str) -> "Envelope":
        if not isinstance(data, dict) or not isinstance(data.get("ok"), bool):
            raise DecodeError(operation, data, "response envelope has no boolean 'ok' field")
        return cls(ok=data["ok"], error=data.get("error"), result=data.get("result"))


def unwrap(data: Any, decode: Callable[[Any], T], *, operation: str) -> T:
    """Return the decoded result of an envelope, or raise.

    Args:
        data: Raw envelope as returned by the transport.
        decode: Converts the ``result`` payload into the expected type.
        operation: API method name, used in error messages.

    Raises:
        APIError: The server answered ``ok: false``.
        DecodeError: The envelope or its payload has an unexpected shape.
    """
    envelope = Envelope.from_dict(data, operation=operation)
    if not envelope.ok:
        description = envelope.error or ""
        logger.warning("{} failed: {}", operation, description)
        raise APIError(description, operation=operation)

    if envelope.result is None:
        raise DecodeError(operation, envelope.result, "missing 'result' payload")
    if not isinstance(envelope.result, dict):
        raise DecodeError(
            operation, envelope.result, f"expected a JSON object, got {type(envelope.result).__name__}"
        )
    try:
        return decode(envelope.result)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise DecodeError(operation, envelope.result, f"{type(e).__name__}: {e}") from e
