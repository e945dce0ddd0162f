"""Tests for the tree-sitter Go adapter."""

from __future__ import annotations

import pytest

from struct2json.describe import describe_flat, describe_tree
from struct2json.errors import SourceParseError
from struct2json.syntax.nodes import (
    ArrayType,
    FieldSpec,
    FuncDecl,
    FunctionType,
    GenDecl,
    InterfaceType,
    MapType,
    NamedType,
    Parameter,
    PointerType,
    QualifiedType,
    StructType,
    TypeSpec,
    UnrecognizedType,
)
from struct2json.syntax.parser import GoSourceParser, parse_file, parse_source
from tests._fixtures.go_builder import SAMPLE_GO, GoSourceBuilder


def _struct(source: str, name: str) -> StructType:
    unit = parse_source(source)
    for decl in unit.decls:
        if isinstance(decl, GenDecl) and decl.keyword == "type":
            for spec in decl.specs:
                if isinstance(spec, TypeSpec) and spec.name == name:
                    assert isinstance(spec.type, StructType)
                    return spec.type
    raise AssertionError(f"struct {name} not found")


def test_parse_sample_declarations() -> None:
    unit = parse_source(SAMPLE_GO, name="sample.go")
    assert unit.name == "sample.go"
    assert unit.package == "main"
    kinds = [decl.keyword if isinstance(decl, GenDecl) else "func" for decl in unit.decls]
    assert kinds == ["import", "type", "type", "type", "func"]
    assert len(unit.decls[0].specs) == 2
    assert unit.decls[-1] == FuncDecl(name="main")


def test_parse_field_shapes() -> None:
    foo = _struct(SAMPLE_GO, "Foo")
    assert foo.fields == (
        FieldSpec(names=("a",), type=NamedType("int")),
        FieldSpec(names=("b",), type=NamedType("string"), tag='db:"beta"'),
        FieldSpec(names=("c",), type=PointerType(NamedType("int"))),
        FieldSpec(names=("d",), type=ArrayType(NamedType("string")), tag='db:"delta" json:"Delta"'),
        FieldSpec(names=("e",), type=MapType(NamedType("string"), NamedType("int"))),
        FieldSpec(names=("f",), type=MapType(NamedType("int"), NamedType("Bar"))),
    )


def test_parse_embedded_and_qualified_fields() -> None:
    boink = _struct(SAMPLE_GO, "Boink")
    assert boink.fields[0] == FieldSpec(names=(), type=NamedType("Foo"))
    assert boink.fields[1].type == PointerType(QualifiedType(NamedType("token"), "FileSet"))
    assert boink.fields[2].type == QualifiedType(NamedType("time"), "Time")


def test_parse_embedded_pointer_and_multi_name_fields() -> None:
    source = """
package models

type Base struct{}

type Item struct {
	*Base
	io.Reader
	x, y int
	buf [16]byte
	name string "json:\\"name\\""
}
"""
    item = _struct(source, "Item")
    assert item.fields[0] == FieldSpec(names=(), type=PointerType(NamedType("Base")))
    assert item.fields[1] == FieldSpec(names=(), type=QualifiedType(NamedType("io"), "Reader"))
    assert item.fields[2].names == ("x", "y")
    assert item.fields[3].type == ArrayType(NamedType("byte"), length="16")
    assert item.fields[4].tag == 'json:"name"'


def test_parse_function_and_interface_types() -> None:
    source = """
package handlers

type Handler struct {
	Fn    func(a, b int, rest ...string) (int, error)
	Any   interface{}
	Named interface {
		Read(p []byte) (n int, err error)
		io.Closer
	}
	Ch chan int
}
"""
    handler = _struct(source, "Handler")
    fn = handler.fields[0].type
    assert fn == FunctionType(
        params=(
            Parameter(names=("a", "b"), type=NamedType("int")),
            Parameter(names=("rest",), type=NamedType("string"), variadic=True),
        ),
        results=(
            Parameter(names=(), type=NamedType("int")),
            Parameter(names=(), type=NamedType("error")),
        ),
    )
    assert handler.fields[1].type == InterfaceType()

    named = handler.fields[2].type
    assert isinstance(named, InterfaceType)
    assert [method.name for method in named.methods] == ["Read"]
    assert named.methods[0].signature.results == (
        Parameter(names=("n",), type=NamedType("int")),
        Parameter(names=("err",), type=NamedType("error")),
    )
    assert named.embedded == (QualifiedType(NamedType("io"), "Closer"),)

    channel = handler.fields[3].type
    assert isinstance(channel, UnrecognizedType)
    assert channel.shape == "ChannelType"
    assert channel.text == "chan int"


def test_unrecognized_shapes_use_camel_case_names() -> None:
    source = """
package main

type Box struct {
	items List[int]
	done  <-chan struct{}
}
"""
    box = _struct(source, "Box")
    shapes = [field.type for field in box.fields]
    assert all(isinstance(shape, UnrecognizedType) for shape in shapes)
    assert [shape.shape for shape in shapes] == ["GenericType", "ChannelType"]
    assert describe_flat(box.fields[0].type) == "unhandledType GenericType"


def test_variadic_parameter_renders_as_ellipsis() -> None:
    source = """
package main

type Logger struct {
	printf func(format string, args ...any)
}
"""
    logger = _struct(source, "Logger")
    assert describe_tree(logger.fields[0].type).to_plain() == {
        "func": {
            "params": [
                {"name": "format", "type": "string"},
                {"name": "args", "type": {"ellipsis": "any"}},
            ],
            "results": [],
        }
    }


def test_parse_grouped_and_alias_type_declarations() -> None:
    source = """
package main

type (
	A struct{ x int }
	B struct{ y int }
)

type C = A

type D []int
"""
    unit = parse_source(source)
    grouped, alias, slice_decl = unit.decls
    assert [spec.name for spec in grouped.specs] == ["A", "B"]
    assert alias.specs[0] == TypeSpec(name="C", type=NamedType("A"), alias=True)
    assert slice_decl.specs[0].type == ArrayType(NamedType("int"))


def test_parse_methods_record_receiver() -> None:
    source = """
package main

type T struct{}

func (t *T) Close() error { return nil }
"""
    unit = parse_source(source)
    method = unit.decls[-1]
    assert isinstance(method, FuncDecl)
    assert method.name == "Close"
    assert method.receiver == "(t *T)"


def test_syntax_error_is_reported_with_location() -> None:
    with pytest.raises(SourceParseError) as excinfo:
        parse_source("package main\n\ntype Foo struct {\n\ta int\n", name="broken.go")
    error = excinfo.value
    assert error.source == "broken.go"
    assert error.line is not None
    assert str(error).startswith("failed parsing broken.go:")


def test_missing_package_clause_is_an_error() -> None:
    with pytest.raises(SourceParseError, match="package"):
        parse_source("type Foo struct{}\n", name="nopkg.go")


def test_parse_file_reads_from_disk(go_builder: GoSourceBuilder) -> None:
    path = go_builder.sample()
    unit = parse_file(path)
    assert unit.name == str(path)
    assert GoSourceParser().parse_file(path) == unit
