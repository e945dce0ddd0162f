"""Ordered, append-only aggregation of struct descriptions."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .models import StructDescription


class Document:
    """Struct descriptions from one or more source units, in emission order.

    Duplicate names from different units are all retained; :meth:`get`
    returns the first.
    """

    def __init__(self, structs: Iterable[StructDescription] = ()) -> None:
        self._structs: List[StructDescription] = list(structs)

    def append(self, *structs: StructDescription) -> None:
        self._structs.extend(structs)

    def extend(self, structs: Iterable[StructDescription]) -> None:
        self._structs.extend(structs)

    def get(self, name: str) -> Optional[StructDescription]:
        for struct in self._structs:
            if struct.name == name:
                return struct
        return None

    def names(self) -> List[str]:
        return [struct.name for struct in self._structs]

    @property
    def structs(self) -> tuple[StructDescription, ...]:
        return tuple(self._structs)

    def __iter__(self) -> Iterator[StructDescription]:
        return iter(list(self._structs))

    def __len__(self) -> int:
        return len(self._structs)

    def __repr__(self) -> str:
        return f"Document(structs={self.names()!r})"


__all__ = ["Document"]
