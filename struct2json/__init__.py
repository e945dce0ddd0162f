"""Describe Go struct declarations as a generic, JSON-ready tree."""

from __future__ import annotations

from .classify import classify
from .collector import collect, collect_file
from .config import Struct2JsonConfig, load_config
from .describe import TypeMode, describe, describe_flat, describe_tree
from .document import Document
from .errors import ConfigError, SourceParseError, Struct2JsonError
from .extractor import BatchResult, StructExtractor, UnitRequest, UnitResult, extract
from .fields import FieldTranslator, translate_fields
from .models import FieldDescription, StructDescription
from .serialize import document_to_dict, dump_document
from .tags import KNOWN_TAG_KEYS, TagExtractor, extract_tags

__all__ = [
    "BatchResult",
    "ConfigError",
    "Document",
    "FieldDescription",
    "FieldTranslator",
    "KNOWN_TAG_KEYS",
    "SourceParseError",
    "StructDescription",
    "StructExtractor",
    "Struct2JsonConfig",
    "Struct2JsonError",
    "TagExtractor",
    "TypeMode",
    "UnitRequest",
    "UnitResult",
    "classify",
    "collect",
    "collect_file",
    "describe",
    "describe_flat",
    "describe_tree",
    "document_to_dict",
    "dump_document",
    "extract",
    "extract_tags",
    "load_config",
    "translate_fields",
]
