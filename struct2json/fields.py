"""Translate parsed field lists into field descriptions."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .describe import TypeMode, describe, describe_flat
from .models import FieldDescription
from .syntax.nodes import FieldSpec
from .tags import TagExtractor


class FieldTranslator:
    """Maps :class:`FieldSpec` entries to :class:`FieldDescription` entries.

    ``first_name_only`` reproduces the older behaviour where ``a, b int``
    produced a single field named ``a``.
    """

    def __init__(
        self,
        mode: TypeMode = TypeMode.FLAT,
        tag_extractor: Optional[TagExtractor] = None,
        *,
        first_name_only: bool = False,
    ) -> None:
        self.mode = TypeMode(mode)
        self.tag_extractor = tag_extractor or TagExtractor()
        self.first_name_only = first_name_only

    def translate(self, fields: Iterable[FieldSpec]) -> List[FieldDescription]:
        descriptions: List[FieldDescription] = []
        for spec in fields:
            field_type = describe(spec.type, self.mode)
            tags = self.tag_extractor.extract(spec.tag)
            if spec.embedded:
                # Embedded fields are named after their flat type, e.g. "*Foo" or "io.Reader".
                names = [describe_flat(spec.type)]
            elif self.first_name_only:
                names = [spec.names[0]]
            else:
                names = list(spec.names)
            for name in names:
                descriptions.append(FieldDescription(name=name, type=field_type, tags=dict(tags)))
        return descriptions


def translate_fields(
    fields: Iterable[FieldSpec], mode: TypeMode = TypeMode.FLAT
) -> List[FieldDescription]:
    return FieldTranslator(mode).translate(fields)


__all__ = ["FieldTranslator", "translate_fields"]
