"""Render type expressions as flat Go-style strings or nested value trees."""

from __future__ import annotations

from enum import Enum
from typing import List, Union

from .syntax.nodes import (
    ArrayType,
    FunctionType,
    InterfaceType,
    MapType,
    NamedType,
    Parameter,
    PointerType,
    QualifiedType,
    StructType,
    TypeExpression,
    UnrecognizedType,
)
from .values import ListValue, ObjectValue, StringValue, TreeValue

UNHANDLED_PREFIX = "unhandledType "


class TypeMode(str, Enum):
    """Output policy for field types."""

    FLAT = "flat"
    TREE = "tree"


def shape_of(expr: object) -> str:
    """Return the shape marker used in placeholders for ``expr``."""
    if isinstance(expr, UnrecognizedType):
        return expr.shape
    return type(expr).__name__


def placeholder(expr: object) -> str:
    return UNHANDLED_PREFIX + shape_of(expr)


def describe(expr: TypeExpression, mode: TypeMode = TypeMode.FLAT) -> Union[str, TreeValue]:
    """Describe ``expr`` under the given output policy. Never raises for unknown shapes."""
    if TypeMode(mode) is TypeMode.TREE:
        return describe_tree(expr)
    return describe_flat(expr)


def describe_flat(expr: TypeExpression) -> str:
    """Render ``expr`` as a compact type signature such as ``[]*map[string]int``.

    Only names, slices/arrays, pointers, qualified names and maps have a flat
    form; every other shape becomes an ``unhandledType <shape>`` placeholder.
    """
    if isinstance(expr, NamedType):
        return expr.name
    if isinstance(expr, ArrayType):
        return "[]" + describe_flat(expr.element)
    if isinstance(expr, PointerType):
        return "*" + describe_flat(expr.referent)
    if isinstance(expr, QualifiedType):
        return describe_flat(expr.base) + "." + expr.selector
    if isinstance(expr, MapType):
        return "map[" + describe_flat(expr.key) + "]" + describe_flat(expr.value)
    return placeholder(expr)


def describe_tree(expr: TypeExpression) -> TreeValue:
    """Render ``expr`` as a nested value tree that keeps interface and signature detail."""
    if isinstance(expr, NamedType):
        return StringValue(expr.name)
    if isinstance(expr, ArrayType):
        node = ObjectValue.of(("array", describe_tree(expr.element)))
        if expr.length is not None:
            node = node.merge(ObjectValue.of(("length", StringValue(expr.length))))
        return node
    if isinstance(expr, PointerType):
        return ObjectValue.of(("star", describe_tree(expr.referent)))
    if isinstance(expr, QualifiedType):
        return ObjectValue.of(
            ("type", StringValue("qualified")),
            ("package", describe_tree(expr.base)),
            ("name", StringValue(expr.selector)),
        )
    if isinstance(expr, MapType):
        return ObjectValue.of(
            ("type", StringValue("map")),
            ("key", describe_tree(expr.key)),
            ("value", describe_tree(expr.value)),
        )
    if isinstance(expr, InterfaceType):
        methods = ListValue(
            tuple(
                ObjectValue.of(
                    ("name", StringValue(method.name)),
                    ("func", _signature(method.signature)),
                )
                for method in expr.methods
            )
        )
        composed = ListValue(tuple(describe_tree(embedded) for embedded in expr.embedded))
        return ObjectValue.of(
            ("interface", ObjectValue.of(("methods", methods), ("composed", composed)))
        )
    if isinstance(expr, FunctionType):
        return ObjectValue.of(("func", _signature(expr)))
    if isinstance(expr, StructType):
        fields: List[TreeValue] = []
        for spec in expr.fields:
            field_type = describe_tree(spec.type)
            for name in spec.names or (describe_flat(spec.type),):
                fields.append(
                    ObjectValue.of(("name", StringValue(name)), ("type", field_type))
                )
        return ObjectValue.of(("struct", ObjectValue.of(("fields", ListValue(tuple(fields))))))
    return StringValue(placeholder(expr))


def _signature(signature: FunctionType) -> ObjectValue:
    return ObjectValue.of(
        ("params", _parameters(signature.params)),
        ("results", _parameters(signature.results)),
    )


def _parameters(params: tuple[Parameter, ...]) -> ListValue:
    items: List[TreeValue] = []
    for param in params:
        param_type = describe_tree(param.type)
        if param.variadic:
            param_type = ObjectValue.of(("ellipsis", param_type))
        if not param.names:
            items.append(ObjectValue.of(("type", param_type)))
            continue
        for name in param.names:
            items.append(ObjectValue.of(("name", StringValue(name)), ("type", param_type)))
    return ListValue(tuple(items))


__all__ = [
    "TypeMode",
    "UNHANDLED_PREFIX",
    "describe",
    "describe_flat",
    "describe_tree",
    "placeholder",
    "shape_of",
]
