"""JSON rendering of documents."""

from __future__ import annotations

import json
from typing import Any, Dict

from .document import Document
from .models import FieldDescription, StructDescription
from .values import to_plain


def field_to_dict(field: FieldDescription) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"name": field.name, "type": to_plain(field.type)}
    if field.tags:
        payload["tags"] = dict(field.tags)
    return payload


def struct_to_dict(struct: StructDescription) -> Dict[str, Any]:
    return {"name": struct.name, "fields": [field_to_dict(field) for field in struct.fields]}


def document_to_dict(document: Document) -> Dict[str, Any]:
    """Return ``{"structs": [...]}``; fields without recognized tags carry no ``tags`` key."""
    return {"structs": [struct_to_dict(struct) for struct in document]}


def dump_document(document: Document, indent: int = 4) -> str:
    return json.dumps(document_to_dict(document), indent=indent)


__all__ = ["document_to_dict", "dump_document", "field_to_dict", "struct_to_dict"]
