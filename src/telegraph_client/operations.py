"""Telegraph API operations.

Each operation builds its parameters, resolves the endpoint, calls the
transport once and unwraps the envelope. The first failing step raises.
"""

from collections.abc import Iterable

from telegraph_client.core.endpoint import resolve_endpoint
from telegraph_client.core.envelope import unwrap
from telegraph_client.core.params import (
    build_account_info_params,
    build_create_account_params,
    build_create_params,
    build_edit_account_params,
    build_edit_params,
    build_get_page_params,
    build_page_list_params,
    build_token_params,
    build_view_params,
)
from telegraph_client.models.account import Account
from telegraph_client.models.page import Page, PageList, PageViews
from telegraph_client.models.short_name import ShortName
from telegraph_client.protocols import TransportProtocol

DEFAULT_ACCOUNT_FIELDS = ("short_name", "author_name", "author_url")


def create_page(
    transport: TransportProtocol, account: Account, page: Page, *, return_content: bool = False
) -> Page:
    """Create a new page. Returns the created Page, with its server-assigned path."""
    params = build_create_params(account, page, return_content=return_content)
    url = resolve_endpoint("createPage")
    return unwrap(transport.perform(url, params), Page.from_dict, operation="createPage")


def edit_page(
    transport: TransportProtocol, account: Account, page: Page, *, return_content: bool = False
) -> Page:
    """Edit an existing page identified by ``page.path``."""
    params = build_edit_params(account, page, return_content=return_content)
    url = resolve_endpoint("editPage", page.path)
    return unwrap(transport.perform(url, params), Page.from_dict, operation="editPage")


def get_page(transport: TransportProtocol, path: str, *, return_content: bool = False) -> Page:
    """Get a page. No account needed."""
    params = build_get_page_params(return_content=return_content)
    url = resolve_endpoint("getPage", path)
    return unwrap(transport.perform(url, params), Page.from_dict, operation="getPage")


def get_page_list(
    transport: TransportProtocol, account: Account, *, offset: int = 0, limit: int = 50
) -> PageList:
    """List pages of the account, most recently created first."""
    params = build_page_list_params(account, offset=offset, limit=limit)
    url = resolve_endpoint("getPageList")
    return unwrap(transport.perform(url, params), PageList.from_dict, operation="getPageList")


def get_views(
    transport: TransportProtocol,
    path: str,
    *,
    year: int = 0,
    month: int = 0,
    day: int = 0,
    hour: int = -1,
) -> PageViews:
    """Get the number of views of a page.

    By default the total count is returned. Pass ``hour``, then ``day``,
    ``month`` and ``year`` to narrow it down.
    """
    params = build_view_params(hour=hour, day=day, month=month, year=year)
    url = resolve_endpoint("getViews", path)
    return unwrap(transport.perform(url, params), PageViews.from_dict, operation="getViews")


def create_account(
    transport: TransportProtocol, short_name: ShortName, *, author_name: str = "", author_url: str = ""
) -> Account:
    """Create a new account. The returned Account carries the new access token."""
    params = build_create_account_params(short_name, author_name=author_name, author_url=author_url)
    url = resolve_endpoint("createAccount")
    return unwrap(transport.perform(url, params), Account.from_dict, operation="createAccount")


def edit_account_info(
    transport: TransportProtocol,
    account: Account,
    *,
    short_name: ShortName | None = None,
    author_name: str = "",
    author_url: str = "",
) -> Account:
    """Update account information. Returns a new Account with the server's values."""
    params = build_edit_account_params(
        account, short_name=short_name, author_name=author_name, author_url=author_url
    )
    url = resolve_endpoint("editAccountInfo")
    return unwrap(transport.perform(url, params), account.merged_with, operation="editAccountInfo")


def get_account_info(
    transport: TransportProtocol, account: Account, *, fields: Iterable[str] = DEFAULT_ACCOUNT_FIELDS
) -> Account:
    """Fetch account information. Returns a new Account with the requested fields."""
    params = build_account_info_params(account, fields=fields)
    url = resolve_endpoint("getAccountInfo")
    return unwrap(transport.perform(url, params), account.merged_with, operation="getAccountInfo")


def revoke_access_token(transport: TransportProtocol, account: Account) -> Account:
    """Revoke the access token and get a new one along with a fresh auth URL."""
    params = build_token_params(account)
    url = resolve_endpoint("revokeAccessToken")
    return unwrap(transport.perform(url, params), account.merged_with, operation="revokeAccessToken")
