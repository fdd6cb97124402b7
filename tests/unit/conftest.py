"""Shared test fixtures."""

from typing import Any

import pytest

from telegraph_client.models.account import Account
from tests.unit.fakes import FakeTransport

PAGE_RESULT: dict[str, Any] = {
    "path": "Sample-Page-12-15",
    "url": "https://telegra.ph/Sample-Page-12-15",
    "title": "Sample Page",
    "description": "Hello, world!",
    "author_name": "Anonymous",
    "author_url": "https://t.me/anonymous",
    "content": [
        {"tag": "p", "children": ["Hello, ", {"tag": "b", "children": ["world"]}, "!"]},
        {"tag": "a", "attrs": {"href": "https://example.com"}, "children": ["link"]},
    ],
    "views": 42,
    "can_edit": True,
}

PAGE_LIST_RESULT: dict[str, Any] = {
    "total_count": 3,
    "pages": [
        {"path": "Newest-01-02", "url": "https://telegra.ph/Newest-01-02", "title": "Newest", "views": 1},
        {"path": "Older-01-01", "url": "https://telegra.ph/Older-01-01", "title": "Older", "views": 7},
    ],
}

ACCOUNT_RESULT: dict[str, Any] = {
    "short_name": "Sandbox",
    "author_name": "Anonymous",
    "author_url": "",
    "access_token": "b968da509bb76866c35425099bc0989a5ec3b32997d55286c657e6994bbb",
    "auth_url": "https://edit.telegra.ph/auth/lu7v7ZxNA3TzIqQB",
}


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def account() -> Account:
    return Account(access_token="t0ken-abcdef")
