"""Telegraph account model."""

from dataclasses import dataclass, replace
from typing import Any

from telegraph_client.models.short_name import ShortName


@dataclass(frozen=True)
class Account:
    """A Telegraph account.

    Owned by the caller. Operations that change account data return a new
    instance instead of mutating this one.
    """

    access_token: str = ""
    short_name: ShortName | None = None
    author_name: str = ""
    author_url: str = ""
    auth_url: str = ""
    page_count: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        short_name = data.get("short_name")
        return cls(
            access_token=data.get("access_token", ""),
            short_name=ShortName(short_name) if short_name is not None else None,
            author_name=data.get("author_name", ""),
            author_url=data.get("author_url", ""),
            auth_url=data.get("auth_url", ""),
            page_count=data.get("page_count"),
        )

    def merged_with(self, data: dict[str, Any]) -> "Account":
        """Return a copy updated with the fields present in a response payload."""
        update = Account.from_dict(data)
        changes: dict[str, Any] = {}
        for name in ("access_token", "short_name", "author_name", "author_url", "auth_url", "page_count"):
            if name in data:
                changes[name] = getattr(update, name)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "access_token": self.access_token,
            "author_name": self.author_name,
            "author_url": self.author_url,
        }
        if self.short_name is not None:
            out["short_name"] = str(self.short_name)
        if self.auth_url:
            out["auth_url"] = self.auth_url
        if self.page_count is not None:
            out["page_count"] = self.page_count
        return out
