"""HTTP transport for the Telegraph API built on requests."""

from typing import Any

import requests
from loguru import logger

from telegraph_client import config
from telegraph_client.errors import TransportError


def _mask_token(token: str) -> str:
    """Show only the first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _safe_params(params: dict[str, str]) -> dict[str, str]:
    if "access_token" not in params:
        return params
    return {**params, "access_token": _mask_token(params["access_token"])}


class TelegraphApi:
    """Default transport: form-encoded POST, JSON envelope back.

    Each request goes out once. Timeouts and HTTP failures surface as
    TransportError.
    """

    def __init__(self, *, session: requests.Session | None = None, timeout: float | None = None) -> None:
        self.sess = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.resolve_timeout()

    def perform(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        """POST ``params`` to ``url`` and return the decoded envelope."""
        logger.debug("Making request: {} {!r}", url, _safe_params(params))
        try:
            r = self.sess.post(url, data=params, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e

        try:
            rv: Any = r.json()
        except ValueError as e:
            raise TransportError(url, f"response is not JSON: {e}") from e
        if not isinstance(rv, dict):
            raise TransportError(url, f"expected a JSON object, got {type(rv).__name__}")
        return rv

    def close(self) -> None:
        self.sess.close()
