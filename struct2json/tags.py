"""Struct tag extraction for a fixed allow-list of well-known keys."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .syntax.literals import unquote

# See https://github.com/golang/go/wiki/Well-known-struct-tags
KNOWN_TAG_KEYS: Tuple[str, ...] = (
    "xml",
    "json",
    "asn1",
    "reform",
    "dynamodb",
    "bigquery",
    "datastore",
    "spanner",
    "bson",
    "gorm",
    "yaml",
    "validate",
    "mapstructure",
    "protobuf",
    "db",
)

_PAIR_RE = re.compile(r'([^\x00-\x20:"\x7f]+):("(?:[^"\\\n]|\\.)*")')
_TOKEN_RE = re.compile(r"\S*")


def iter_tag_pairs(raw: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, value)`` pairs from a ``key:"value" ...`` tag string.

    Malformed segments are skipped up to the next whitespace and scanning
    resumes there, so one bad pair never hides the pairs around it.
    """
    pos = 0
    length = len(raw)
    while pos < length:
        if raw[pos].isspace():
            pos += 1
            continue
        match = _PAIR_RE.match(raw, pos)
        if match is None:
            pos = max(_TOKEN_RE.match(raw, pos).end(), pos + 1)
            continue
        pos = match.end()
        try:
            value = unquote(match.group(2))
        except ValueError:
            continue
        yield match.group(1), value


class TagExtractor:
    """Extracts allow-listed keys from raw struct tags."""

    def __init__(self, keys: Iterable[str] = KNOWN_TAG_KEYS) -> None:
        self._keys = frozenset(keys)

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    def extract(self, raw: Optional[str]) -> Dict[str, str]:
        """Return recognized tag values sorted by key; empty when nothing matches."""
        if not raw:
            return {}
        found: Dict[str, str] = {}
        for key, value in iter_tag_pairs(raw):
            # The first occurrence of a key wins.
            if key in self._keys and key not in found:
                found[key] = value
        return dict(sorted(found.items()))


def extract_tags(raw: Optional[str], keys: Iterable[str] = KNOWN_TAG_KEYS) -> Dict[str, str]:
    return TagExtractor(keys).extract(raw)


__all__ = ["KNOWN_TAG_KEYS", "TagExtractor", "extract_tags", "iter_tag_pairs"]
