"""Go string literal helpers."""

from __future__ import annotations

import re

_ESCAPE_RE = re.compile(
    r"""\\(?:
        (?P<simple>[abfnrtv\\'"])
        |x(?P<hex>[0-9A-Fa-f]{2})
        |(?P<octal>[0-7]{3})
        |u(?P<u16>[0-9A-Fa-f]{4})
        |U(?P<u32>[0-9A-Fa-f]{8})
    )""",
    re.VERBOSE,
)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def unquote(literal: str) -> str:
    """Return the value of a Go string literal (``"..."`` or raw backquoted).

    Raises ``ValueError`` for anything that is not a well-formed literal.
    """
    if len(literal) < 2 or literal[0] != literal[-1] or literal[0] not in {'"', "`"}:
        raise ValueError(f"not a string literal: {literal!r}")
    body = literal[1:-1]
    if literal[0] == "`":
        if "`" in body:
            raise ValueError("unexpected backquote inside raw string")
        # Carriage returns are discarded from raw string values.
        return body.replace("\r", "")
    return _unescape(body)


def _unescape(body: str) -> str:
    parts: list[str] = []
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char == '"' or char == "\n":
            raise ValueError(f"unexpected {char!r} at offset {pos}")
        if char != "\\":
            parts.append(char)
            pos += 1
            continue
        match = _ESCAPE_RE.match(body, pos)
        if match is None:
            raise ValueError(f"invalid escape sequence at offset {pos}")
        parts.append(_decode_escape(match))
        pos = match.end()
    return "".join(parts)


def _decode_escape(match: re.Match[str]) -> str:
    if match.group("simple"):
        return _SIMPLE_ESCAPES[match.group("simple")]
    if match.group("hex"):
        return chr(int(match.group("hex"), 16))
    if match.group("octal"):
        value = int(match.group("octal"), 8)
        if value > 0xFF:
            raise ValueError(f"octal escape out of range: {match.group(0)}")
        return chr(value)
    code = int(match.group("u16") or match.group("u32"), 16)
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        raise ValueError(f"invalid unicode escape: {match.group(0)}")
    return chr(code)


__all__ = ["unquote"]
