"""Validated account short name."""

import json
from typing import Any

from telegraph_client.config import SHORT_NAME_MAX_LENGTH, SHORT_NAME_MIN_LENGTH
from telegraph_client.errors import FormatError, LengthError


class ShortName:
    """Account name, displayed above the "Edit/Publish" button on Telegraph.

    Helps users with several accounts remember which one they are using;
    other users never see it. Holds 1-32 Unicode codepoints. Instances are
    immutable and can only be created through validation, so an empty or
    oversized ShortName never exists.
    """

    __slots__ = ("_value",)

    def __init__(self, raw: str) -> None:
        # len() on str counts codepoints, so multi-byte characters count once.
        count = len(raw)
        if count < SHORT_NAME_MIN_LENGTH or count > SHORT_NAME_MAX_LENGTH:
            raise LengthError(count, SHORT_NAME_MIN_LENGTH, SHORT_NAME_MAX_LENGTH)
        object.__setattr__(self, "_value", raw)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "ShortName is immutable"
        raise AttributeError(msg)

    def __copy__(self) -> "ShortName":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "ShortName":
        return self

    def __reduce__(self) -> tuple[type["ShortName"], tuple[str]]:
        return (ShortName, (self._value,))

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def from_json(cls, token: str | bytes) -> "ShortName":
        """Parse a JSON string token such as ``"\\"anonymous\\""``."""
        try:
            raw = json.loads(token)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FormatError(token, str(e)) from e
        if not isinstance(raw, str):
            raise FormatError(token, f"expected a JSON string, got {type(raw).__name__}")
        return cls(raw)

    def to_json(self) -> str:
        """Render as a quoted JSON string."""
        return json.dumps(self._value, ensure_ascii=False)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ShortName({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShortName):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
