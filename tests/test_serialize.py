"""Tests for struct2json.serialize."""

from __future__ import annotations

import json

from struct2json.collector import collect_file
from struct2json.describe import TypeMode
from struct2json.document import Document
from struct2json.fields import FieldTranslator
from struct2json.models import FieldDescription, StructDescription
from struct2json.serialize import document_to_dict, dump_document
from tests._fixtures.go_builder import GoSourceBuilder


def test_tags_key_is_omitted_when_empty() -> None:
    document = Document(
        [
            StructDescription(
                name="Foo",
                fields=(
                    FieldDescription(name="a", type="int"),
                    FieldDescription(name="d", type="[]string", tags={"db": "delta"}),
                ),
            )
        ]
    )
    assert document_to_dict(document) == {
        "structs": [
            {
                "name": "Foo",
                "fields": [
                    {"name": "a", "type": "int"},
                    {"name": "d", "type": "[]string", "tags": {"db": "delta"}},
                ],
            }
        ]
    }


def test_empty_document_serializes_to_empty_list() -> None:
    assert json.loads(dump_document(Document())) == {"structs": []}


def test_sample_document_matches_expected_json(go_builder: GoSourceBuilder) -> None:
    document = Document(collect_file(go_builder.sample()))
    text = dump_document(document)
    payload = json.loads(text)

    assert [struct["name"] for struct in payload["structs"]] == ["Bar", "Foo", "Boink"]
    foo = payload["structs"][1]
    fields = {field["name"]: field for field in foo["fields"]}
    assert fields["d"] == {"name": "d", "type": "[]string", "tags": {"db": "delta", "json": "Delta"}}
    assert fields["f"] == {"name": "f", "type": "map[int]Bar"}
    boink = payload["structs"][2]
    assert boink["fields"][0] == {"name": "Foo", "type": "Foo"}
    assert boink["fields"][1] == {"name": "fset", "type": "*token.FileSet"}
    # Four-space indentation by default.
    assert text.splitlines()[1].startswith('    "structs"')


def test_tree_mode_types_serialize_as_objects(go_builder: GoSourceBuilder) -> None:
    translator = FieldTranslator(TypeMode.TREE)
    document = Document(collect_file(go_builder.sample(), ["Foo"], translator))
    payload = json.loads(dump_document(document, indent=2))
    fields = {field["name"]: field for field in payload["structs"][0]["fields"]}
    assert fields["c"]["type"] == {"star": "int"}
    assert fields["e"]["type"] == {"type": "map", "key": "string", "value": "int"}
