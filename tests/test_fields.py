"""Tests for struct2json.fields."""

from __future__ import annotations

from struct2json.describe import TypeMode
from struct2json.fields import FieldTranslator, translate_fields
from struct2json.models import FieldDescription
from struct2json.syntax.nodes import (
    ArrayType,
    FieldSpec,
    NamedType,
    PointerType,
    QualifiedType,
)
from struct2json.tags import TagExtractor
from struct2json.values import ObjectValue


def test_translation_preserves_declaration_order() -> None:
    fields = [
        FieldSpec(names=("a",), type=NamedType("int")),
        FieldSpec(names=("b",), type=NamedType("string")),
    ]
    result = translate_fields(fields)
    assert [field.name for field in result] == ["a", "b"]
    assert [field.type for field in result] == ["int", "string"]


def test_multi_name_fields_emit_one_description_per_name() -> None:
    spec = FieldSpec(names=("a", "b", "c"), type=NamedType("int"), tag='json:"shared"')
    result = FieldTranslator().translate([spec])
    assert [field.name for field in result] == ["a", "b", "c"]
    assert all(field.type == "int" for field in result)
    assert all(field.tags == {"json": "shared"} for field in result)


def test_first_name_only_emits_single_description() -> None:
    spec = FieldSpec(names=("a", "b"), type=NamedType("int"))
    result = FieldTranslator(first_name_only=True).translate([spec])
    assert result == [FieldDescription(name="a", type="int", tags={})]


def test_embedded_field_is_named_after_its_type() -> None:
    result = translate_fields(
        [
            FieldSpec(names=(), type=NamedType("Foo")),
            FieldSpec(names=(), type=PointerType(QualifiedType(NamedType("sync"), "Mutex"))),
        ]
    )
    assert result[0] == FieldDescription(name="Foo", type="Foo", tags={})
    assert result[1].name == "*sync.Mutex"
    assert result[1].type == "*sync.Mutex"


def test_embedded_field_name_stays_flat_in_tree_mode() -> None:
    result = FieldTranslator(TypeMode.TREE).translate(
        [FieldSpec(names=(), type=PointerType(NamedType("Base")))]
    )
    assert result[0].name == "*Base"
    assert isinstance(result[0].type, ObjectValue)
    assert result[0].type.to_plain() == {"star": "Base"}


def test_tags_use_injected_extractor() -> None:
    translator = FieldTranslator(tag_extractor=TagExtractor(["db"]))
    result = translator.translate(
        [FieldSpec(names=("d",), type=ArrayType(NamedType("string")), tag='db:"delta" json:"Delta"')]
    )
    assert result[0].tags == {"db": "delta"}


def test_fields_without_tags_have_empty_mapping() -> None:
    result = translate_fields([FieldSpec(names=("x",), type=NamedType("int"))])
    assert result[0].tags == {}
