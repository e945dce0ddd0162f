"""Generic value tree used for nested type descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class StringValue:
    value: str

    def to_plain(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListValue:
    items: Tuple["TreeValue", ...] = ()

    def __iter__(self) -> Iterator["TreeValue"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_plain(self) -> list:
        return [item.to_plain() for item in self.items]


@dataclass(frozen=True)
class ObjectValue:
    """An ordered mapping from keys to tree values."""

    entries: Tuple[Tuple[str, "TreeValue"], ...] = ()

    @classmethod
    def of(cls, *pairs: Tuple[str, "TreeValue"]) -> "ObjectValue":
        result = cls()
        for key, value in pairs:
            result = result.with_entry(key, value)
        return result

    def __contains__(self, key: object) -> bool:
        return any(existing == key for existing, _ in self.entries)

    def get(self, key: str) -> Optional["TreeValue"]:
        for existing, value in self.entries:
            if existing == key:
                return value
        return None

    def with_entry(self, key: str, value: "TreeValue") -> "ObjectValue":
        """Return a copy with ``key`` set, replacing an existing entry in place."""
        if key in self:
            return ObjectValue(
                tuple((k, value if k == key else v) for k, v in self.entries)
            )
        return ObjectValue(self.entries + ((key, value),))

    def merge(self, other: "ObjectValue") -> "ObjectValue":
        result = self
        for key, value in other.entries:
            result = result.with_entry(key, value)
        return result

    def to_plain(self) -> dict:
        return {key: value.to_plain() for key, value in self.entries}


TreeValue = Union[StringValue, ListValue, ObjectValue]


def to_plain(value: Union[str, TreeValue]) -> Any:
    """Convert a flat string or tree value into plain JSON-compatible data."""
    if isinstance(value, str):
        return value
    return value.to_plain()


__all__ = ["ListValue", "ObjectValue", "StringValue", "TreeValue", "to_plain"]
