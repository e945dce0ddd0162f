"""Collect struct descriptions from one parsed source unit."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .classify import classify
from .fields import FieldTranslator
from .logging import get_logger
from .models import StructDescription
from .syntax.nodes import SourceUnit
from .syntax.parser import GoSourceParser

logger = get_logger("collector")


def collect(
    unit: SourceUnit,
    requested_names: Iterable[str] = (),
    translator: Optional[FieldTranslator] = None,
) -> List[StructDescription]:
    """Return the structs declared in ``unit``, optionally limited to ``requested_names``.

    Structs are indexed by name, so a repeated name keeps the position of its
    first declaration and the fields of its last one. Requested names that
    are not declared are skipped.
    """
    translator = translator or FieldTranslator()
    wanted = set(requested_names)

    structs: Dict[str, StructDescription] = {}
    for decl in unit.decls:
        match = classify(decl)
        if match is None:
            continue
        name, struct_type = match
        if name in structs:
            logger.debug("%s: struct %s declared again; keeping the last declaration", unit.name, name)
        structs[name] = StructDescription(
            name=name, fields=tuple(translator.translate(struct_type.fields))
        )

    if not wanted:
        return list(structs.values())

    missing = wanted.difference(structs)
    if missing:
        logger.debug("%s: requested structs not found: %s", unit.name, ", ".join(sorted(missing)))
    return [struct for name, struct in structs.items() if name in wanted]


def collect_file(
    path: Union[str, Path],
    requested_names: Iterable[str] = (),
    translator: Optional[FieldTranslator] = None,
    parser: Optional[GoSourceParser] = None,
) -> List[StructDescription]:
    """Parse ``path`` and collect its structs; raises ``SourceParseError`` on bad input."""
    unit = (parser or GoSourceParser()).parse_file(path)
    return collect(unit, requested_names, translator)


__all__ = ["collect", "collect_file"]
