"""Tests for request parameter builders."""

import json

import pytest

from telegraph_client.core.params import (
    build_account_info_params,
    build_create_account_params,
    build_create_params,
    build_edit_account_params,
    build_edit_params,
    build_get_page_params,
    build_page_list_params,
    build_view_params,
)
from telegraph_client.errors import EncodeError
from telegraph_client.models.account import Account
from telegraph_client.models.page import NodeElement, Page, tag, text
from telegraph_client.models.short_name import ShortName


def test_create_params_omit_empty_author_fields(account: Account) -> None:
    params = build_create_params(account, Page.draft("Hi", [text("hello")]))
    assert "author_name" not in params
    assert "author_url" not in params


def test_create_params_include_author_fields_when_set(account: Account) -> None:
    page = Page.draft("Hi", [text("hello")], author_name="Me", author_url="https://t.me/me")
    params = build_create_params(account, page)
    assert params["author_name"] == "Me"
    assert params["author_url"] == "https://t.me/me"


def test_create_params_order_and_values(account: Account) -> None:
    page = Page.draft("Hi", [tag("p", "hello")], author_name="Me")
    params = build_create_params(account, page, return_content=True)
    assert list(params) == ["access_token", "title", "author_name", "return_content", "content"]
    assert params["access_token"] == "t0ken-abcdef"
    assert params["return_content"] == "true"
    assert json.loads(params["content"]) == [{"tag": "p", "children": ["hello"]}]


def test_edit_params_match_create_policy(account: Account) -> None:
    page = Page.draft("Hi", [text("hello")], path="Hi-01-01")
    params = build_edit_params(account, page)
    assert params["return_content"] == "false"
    assert "author_name" not in params
    assert "path" not in params


def test_page_params_require_title_and_content(account: Account) -> None:
    with pytest.raises(ValueError, match="title"):
        build_create_params(account, Page.draft("", [text("x")]))
    with pytest.raises(ValueError, match="content"):
        build_create_params(account, Page(title="Hi"))


def test_page_params_propagate_encode_error(account: Account) -> None:
    page = Page.draft("Hi", [NodeElement(tag="img", attrs={"width": 1})])  # type: ignore[dict-item]
    with pytest.raises(EncodeError):
        build_create_params(account, page)


def test_get_page_params_are_anonymous() -> None:
    assert build_get_page_params(return_content=True) == {"return_content": "true"}
    assert build_get_page_params() == {"return_content": "false"}


def test_page_list_params(account: Account) -> None:
    assert build_page_list_params(account, offset=10, limit=5) == {
        "access_token": "t0ken-abcdef",
        "offset": "10",
        "limit": "5",
    }


@pytest.mark.parametrize(("offset", "limit"), [(-1, 50), (0, -1), (0, 201)])
def test_page_list_params_reject_out_of_range(account: Account, offset: int, limit: int) -> None:
    with pytest.raises(ValueError):
        build_page_list_params(account, offset=offset, limit=limit)


def test_view_params_invalid_hour_truncates_everything() -> None:
    assert build_view_params(hour=-1, day=5, month=3, year=2024) == {}


def test_view_params_full_chain() -> None:
    params = build_view_params(hour=10, day=5, month=3, year=2024)
    assert params == {"hour": "10", "day": "5", "month": "3", "year": "2024"}
    assert list(params) == ["hour", "day", "month", "year"]


def test_view_params_invalid_day_keeps_only_hour() -> None:
    assert build_view_params(hour=10, day=0, month=3, year=2024) == {"hour": "10"}


def test_view_params_invalid_month_drops_year() -> None:
    assert build_view_params(hour=0, day=1, month=0, year=2024) == {"hour": "0", "day": "1"}


@pytest.mark.parametrize("year", [1999, 2101, 0])
def test_view_params_year_out_of_range_is_dropped(year: int) -> None:
    assert build_view_params(hour=1, day=1, month=1, year=year) == {"hour": "1", "day": "1", "month": "1"}


def test_view_params_year_without_month_is_ignored() -> None:
    assert build_view_params(year=2024) == {}


def test_view_params_default_requests_total() -> None:
    assert build_view_params() == {}


def test_create_account_params() -> None:
    assert build_create_account_params(ShortName("Sandbox"), author_name="Anonymous") == {
        "short_name": "Sandbox",
        "author_name": "Anonymous",
    }


def test_edit_account_params_only_send_supplied_fields(account: Account) -> None:
    assert build_edit_account_params(account, author_url="https://t.me/me") == {
        "access_token": "t0ken-abcdef",
        "author_url": "https://t.me/me",
    }
    assert build_edit_account_params(account, short_name=ShortName("New"))["short_name"] == "New"


def test_account_info_params_encode_fields_as_json(account: Account) -> None:
    params = build_account_info_params(account, fields=["short_name", "page_count"])
    assert params["fields"] == '["short_name","page_count"]'


def test_account_info_params_reject_unknown_fields(account: Account) -> None:
    with pytest.raises(ValueError, match="Unknown account fields"):
        build_account_info_params(account, fields=["short_name", "password"])


def test_edit_params_require_path(account: Account) -> None:
    with pytest.raises(ValueError, match="path"):
        build_edit_params(account, Page.draft("Hi", [text("hello")]))
