"""Go syntax model and the tree-sitter adapter that builds it."""

from __future__ import annotations

from .nodes import (
    ArrayType,
    Declaration,
    FieldSpec,
    FuncDecl,
    FunctionType,
    GenDecl,
    InterfaceType,
    MapType,
    Method,
    NamedType,
    Parameter,
    PointerType,
    QualifiedType,
    SourceUnit,
    StructType,
    TypeExpression,
    TypeSpec,
    UnrecognizedType,
    ValueSpec,
)
from .parser import GoSourceParser, parse_file, parse_source

__all__ = [
    "ArrayType",
    "Declaration",
    "FieldSpec",
    "FuncDecl",
    "FunctionType",
    "GenDecl",
    "GoSourceParser",
    "InterfaceType",
    "MapType",
    "Method",
    "NamedType",
    "Parameter",
    "PointerType",
    "QualifiedType",
    "SourceUnit",
    "StructType",
    "TypeExpression",
    "TypeSpec",
    "UnrecognizedType",
    "ValueSpec",
    "parse_file",
    "parse_source",
]
