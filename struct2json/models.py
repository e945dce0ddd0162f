"""Output data models shared across struct2json components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .values import TreeValue


@dataclass(frozen=True)
class FieldDescription:
    """A named struct field with its rendered type and recognized tags."""

    name: str
    type: Union[str, TreeValue]
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class StructDescription:
    """A struct declaration with fields in declaration order."""

    name: str
    fields: Tuple[FieldDescription, ...] = ()

    def field(self, name: str) -> FieldDescription | None:
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None
