"""Configuration constants for telegraph-client."""

import os
from pathlib import Path

from loguru import logger

# Scheme and domain of the API. Override for a proxy or a test server.
API_BASE_URL: str = os.environ.get("TELEGRAPH_API_URL", "https://api.telegra.ph").rstrip("/")

# Account-scoped and path-scoped URL templates.
ACCOUNT_ENDPOINT: str = "{base}/{method}"
PATH_ENDPOINT: str = "{base}/{method}/{path}"

# Used when TELEGRAPH_TIMEOUT is unset or not a number.
HTTP_TIMEOUT_SECONDS: float = 30.0
HTTP_TIMEOUT_ENV: str = "TELEGRAPH_TIMEOUT"

# Access token location for the CLI. The environment variable wins, then the
# first file found is used.
ACCESS_TOKEN_ENV: str = "TELEGRAPH_ACCESS_TOKEN"
ACCESS_TOKEN_FILES: list[Path] = [
    Path("~/.config/telegraph-token.txt").expanduser(),
    Path("~/.config/secret/telegraph-token.txt").expanduser(),
]

SHORT_NAME_MIN_LENGTH: int = 1
SHORT_NAME_MAX_LENGTH: int = 32

PAGE_LIST_MAX_LIMIT: int = 200

VIEWS_MIN_YEAR: int = 2000
VIEWS_MAX_YEAR: int = 2100


def resolve_access_token() -> str | None:
    """Return the access token from the environment or the first token file."""
    token = os.environ.get(ACCESS_TOKEN_ENV, "").strip()
    if token:
        return token
    for token_path in ACCESS_TOKEN_FILES:
        try:
            return token_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            pass
    return None


def resolve_timeout() -> float:
    """Return the HTTP timeout from the environment, or the default."""
    raw = os.environ.get(HTTP_TIMEOUT_ENV, "").strip()
    if not raw:
        return HTTP_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid {}={!r}, using {}s", HTTP_TIMEOUT_ENV, raw, HTTP_TIMEOUT_SECONDS)
        return HTTP_TIMEOUT_SECONDS
