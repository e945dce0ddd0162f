"""Immutable declaration and type nodes for parsed Go source units."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class NamedType:
    """A simple or built-in type name such as ``int`` or ``Foo``."""

    name: str


@dataclass(frozen=True)
class QualifiedType:
    """A package-qualified type name such as ``time.Time``."""

    base: "TypeExpression"
    selector: str


@dataclass(frozen=True)
class ArrayType:
    """A slice (``[]T``) or fixed-length array (``[N]T``)."""

    element: "TypeExpression"
    length: Optional[str] = None


@dataclass(frozen=True)
class PointerType:
    referent: "TypeExpression"


@dataclass(frozen=True)
class MapType:
    key: "TypeExpression"
    value: "TypeExpression"


@dataclass(frozen=True)
class Parameter:
    """One parameter group of a signature; ``names`` is empty for unnamed parameters."""

    names: Tuple[str, ...]
    type: "TypeExpression"
    variadic: bool = False


@dataclass(frozen=True)
class FunctionType:
    params: Tuple[Parameter, ...] = ()
    results: Tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class Method:
    name: str
    signature: FunctionType


@dataclass(frozen=True)
class InterfaceType:
    """A method set, plus embedded interfaces or constraint terms."""

    methods: Tuple[Method, ...] = ()
    embedded: Tuple["TypeExpression", ...] = ()


@dataclass(frozen=True)
class FieldSpec:
    """A field declaration line; no names means an embedded field."""

    names: Tuple[str, ...]
    type: "TypeExpression"
    tag: Optional[str] = None

    @property
    def embedded(self) -> bool:
        return not self.names


@dataclass(frozen=True)
class StructType:
    fields: Tuple[FieldSpec, ...] = ()


@dataclass(frozen=True)
class UnrecognizedType:
    """Any type shape outside the modelled variants (channels, generics, ...)."""

    shape: str
    text: str = ""


TypeExpression = Union[
    NamedType,
    QualifiedType,
    ArrayType,
    PointerType,
    MapType,
    InterfaceType,
    FunctionType,
    StructType,
    UnrecognizedType,
]


@dataclass(frozen=True)
class TypeSpec:
    """``Name T`` or ``Name = T`` inside a ``type`` declaration."""

    name: str
    type: TypeExpression
    alias: bool = False


@dataclass(frozen=True)
class ValueSpec:
    """An import, var or const spec kept only as source text."""

    text: str


Spec = Union[TypeSpec, ValueSpec]


@dataclass(frozen=True)
class GenDecl:
    """A generic declaration: ``type``, ``import``, ``var`` or ``const``."""

    keyword: str
    specs: Tuple[Spec, ...] = ()


@dataclass(frozen=True)
class FuncDecl:
    name: str
    receiver: Optional[str] = None


Declaration = Union[GenDecl, FuncDecl]


@dataclass(frozen=True)
class SourceUnit:
    """One parsed Go file and its top-level declarations in source order."""

    name: str
    package: Optional[str] = None
    decls: Tuple[Declaration, ...] = field(default_factory=tuple)


__all__ = [
    "ArrayType",
    "Declaration",
    "FieldSpec",
    "FuncDecl",
    "FunctionType",
    "GenDecl",
    "InterfaceType",
    "MapType",
    "Method",
    "NamedType",
    "Parameter",
    "PointerType",
    "QualifiedType",
    "SourceUnit",
    "Spec",
    "StructType",
    "TypeExpression",
    "TypeSpec",
    "UnrecognizedType",
    "ValueSpec",
]
