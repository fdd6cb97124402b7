"""Client library for the Telegraph publishing API."""

from loguru import logger

from telegraph_client.api import TelegraphApi
from telegraph_client.errors import (
    APIError,
    DecodeError,
    EncodeError,
    FormatError,
    LengthError,
    TelegraphError,
    TransportError,
)
from telegraph_client.models.account import Account
from telegraph_client.models.page import NodeElement, Page, PageList, PageViews, tag, text
from telegraph_client.models.short_name import ShortName
from telegraph_client.operations import (
    create_account,
    create_page,
    edit_account_info,
    edit_page,
    get_account_info,
    get_page,
    get_page_list,
    get_views,
    revoke_access_token,
)
from telegraph_client.protocols import TransportProtocol

logger.disable("telegraph_client")

__all__ = [
    "APIError",
    "Account",
    "DecodeError",
    "EncodeError",
    "FormatError",
    "LengthError",
    "NodeElement",
    "Page",
    "PageList",
    "PageViews",
    "ShortName",
    "TelegraphApi",
    "TelegraphError",
    "TransportError",
    "TransportProtocol",
    "create_account",
    "create_page",
    "edit_account_info",
    "edit_page",
    "get_account_info",
    "get_page",
    "get_page_list",
    "get_views",
    "revoke_access_token",
    "tag",
    "text",
]
