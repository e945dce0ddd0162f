"""Exception types raised by struct2json."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class Struct2JsonError(Exception):
    """Base class for struct2json failures."""


class ConfigError(Struct2JsonError):
    """Raised when the configuration file cannot be parsed or holds invalid values."""


class SourceParseError(Struct2JsonError):
    """Raised when a Go source unit cannot be read or parsed.

    The error is fatal for the unit it names; callers decide whether the
    rest of a batch continues.
    """

    def __init__(
        self,
        source: Union[str, Path],
        cause: Union[str, BaseException],
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.source = str(source)
        self.cause = cause
        self.line = line
        self.column = column
        location = self.source
        if line is not None:
            location = f"{location}:{line}"
            if column is not None:
                location = f"{location}:{column}"
        super().__init__(f"failed parsing {location}: {cause}")


__all__ = ["ConfigError", "SourceParseError", "Struct2JsonError"]
