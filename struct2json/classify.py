"""Decide whether a top-level declaration declares a named struct type."""

from __future__ import annotations

from typing import Optional, Tuple

from .syntax.nodes import Declaration, GenDecl, StructType, TypeSpec


def classify(decl: Declaration) -> Optional[Tuple[str, StructType]]:
    """Return ``(name, struct)`` for ``type Name struct {...}``, otherwise ``None``.

    Grouped declarations with more than one spec are not considered, so
    ``type ( A struct{}; B struct{} )`` yields nothing.
    """
    if not isinstance(decl, GenDecl) or decl.keyword != "type":
        return None
    if len(decl.specs) != 1:
        return None
    spec = decl.specs[0]
    if not isinstance(spec, TypeSpec) or not spec.name:
        return None
    if not isinstance(spec.type, StructType):
        return None
    return spec.name, spec.type


__all__ = ["classify"]
