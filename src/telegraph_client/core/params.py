"""Build request parameters for each API method.

Every builder returns an ordered ``dict[str, str]`` ready for form encoding.
Optional personalization fields (``author_name``, ``author_url``) are sent
only when non-empty.
"""

import json
from collections.abc import Callable, Iterable

from telegraph_client.config import PAGE_LIST_MAX_LIMIT, VIEWS_MAX_YEAR, VIEWS_MIN_YEAR
from telegraph_client.models.account import Account
from telegraph_client.models.page import Page, encode_content
from telegraph_client.models.short_name import ShortName

ACCOUNT_FIELDS = frozenset({"short_name", "author_name", "author_url", "auth_url", "page_count"})

# Ordered from finest to coarsest granularity. Each field is sent only when
# its own check passes and every field before it was sent.
VIEWS_GUARDS: tuple[tuple[str, Callable[[int], bool]], ...] = (
    ("hour", lambda hour: hour > -1),
    ("day", lambda day: day > 0),
    ("month", lambda month: month > 0),
    ("year", lambda year: VIEWS_MIN_YEAR <= year <= VIEWS_MAX_YEAR),
)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def _add_optional(params: dict[str, str], name: str, value: str) -> None:
    if value:
        params[name] = value


def _page_params(page: Page, *, return_content: bool) -> dict[str, str]:
    if not page.title:
        msg = "Page title is required"
        raise ValueError(msg)
    if page.content is None:
        msg = "Page content is required"
        raise ValueError(msg)

    params = {"title": page.title}
    _add_optional(params, "author_name", page.author_name)
    _add_optional(params, "author_url", page.author_url)
    params["return_content"] = format_bool(return_content)
    params["content"] = encode_content(page.content)
    return params


def build_create_params(account: Account, page: Page, *, return_content: bool = False) -> dict[str, str]:
    """Parameters for ``createPage``."""
    return {"access_token": account.access_token, **_page_params(page, return_content=return_content)}


def build_edit_params(account: Account, page: Page, *, return_content: bool = False) -> dict[str, str]:
    """Parameters for ``editPage``. The page path goes into the URL, not here."""
    if not page.path:
        msg = "Page path is required to edit a page"
        raise ValueError(msg)
    return {"access_token": account.access_token, **_page_params(page, return_content=return_content)}


def build_get_page_params(*, return_content: bool = False) -> dict[str, str]:
    """Parameters for ``getPage``. Anonymous: no access token."""
    return {"return_content": format_bool(return_content)}


def build_page_list_params(account: Account, *, offset: int = 0, limit: int = 50) -> dict[str, str]:
    """Parameters for ``getPageList``."""
    if offset < 0:
        msg = f"offset must be >= 0, got {offset}"
        raise ValueError(msg)
    if not 0 <= limit <= PAGE_LIST_MAX_LIMIT:
        msg = f"limit must be within 0-{PAGE_LIST_MAX_LIMIT}, got {limit}"
        raise ValueError(msg)
    return {
        "access_token": account.access_token,
        "offset": str(offset),
        "limit": str(limit),
    }


def build_view_params(*, hour: int = -1, day: int = 0, month: int = 0, year: int = 0) -> dict[str, str]:
    """Parameters for ``getViews``.

    Finer granularity requires the coarser context: ``day`` is sent only with
    ``hour``, ``month`` only with ``day``, ``year`` only with ``month``. The
    first failing check drops every field after it. With no arguments the
    total view count is requested.
    """
    values = {"hour": hour, "day": day, "month": month, "year": year}
    params: dict[str, str] = {}
    for name, accepts in VIEWS_GUARDS:
        value = values[name]
        if not accepts(value):
            break
        params[name] = str(value)
    return params


def build_create_account_params(
    short_name: ShortName, *, author_name: str = "", author_url: str = ""
) -> dict[str, str]:
    """Parameters for ``createAccount``."""
    params = {"short_name": str(short_name)}
    _add_optional(params, "author_name", author_name)
    _add_optional(params, "author_url", author_url)
    return params


def build_edit_account_params(
    account: Account,
    *,
    short_name: ShortName | None = None,
    author_name: str = "",
    author_url: str = "",
) -> dict[str, str]:
    """Parameters for ``editAccountInfo``."""
    params = {"access_token": account.access_token}
    if short_name is not None:
        params["short_name"] = str(short_name)
    _add_optional(params, "author_name", author_name)
    _add_optional(params, "author_url", author_url)
    return params


def build_account_info_params(account: Account, *, fields: Iterable[str]) -> dict[str, str]:
    """Parameters for ``getAccountInfo``."""
    field_list = list(fields)
    unknown = sorted(set(field_list) - ACCOUNT_FIELDS)
    if unknown:
        msg = f"Unknown account fields: {unknown!r}"
        raise ValueError(msg)
    return {
        "access_token": account.access_token,
        "fields": json.dumps(field_list, separators=(",", ":")),
    }


def build_token_params(account: Account) -> dict[str, str]:
    """Parameters for methods that take only the access token."""
    return {"access_token": account.access_token}
