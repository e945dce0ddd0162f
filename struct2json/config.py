"""Configuration loading for struct2json (.struct2json.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .describe import TypeMode
from .errors import ConfigError
from .tags import KNOWN_TAG_KEYS

CONFIG_FILENAME = ".struct2json.yml"


@dataclass(frozen=True)
class Struct2JsonConfig:
    """Effective settings for one extraction run."""

    type_mode: TypeMode = TypeMode.FLAT
    first_name_only: bool = False
    keep_going: bool = False
    jobs: int = 1
    indent: int = 4
    tags: Tuple[str, ...] = KNOWN_TAG_KEYS
    source: Optional[Path] = field(default=None, compare=False)

    def with_overrides(self, **overrides: Any) -> "Struct2JsonConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "type_mode" in changes:
            changes["type_mode"] = _as_type_mode(changes["type_mode"])
        if "jobs" in changes:
            changes["jobs"] = _as_positive_int("jobs", changes["jobs"])
        if "indent" in changes:
            changes["indent"] = _as_non_negative_int("indent", changes["indent"])
        return replace(self, **changes)


def load_config(config_path: Optional[Path] = None, *, required: bool = False) -> Struct2JsonConfig:
    """Load configuration from disk, falling back to defaults when no file exists."""
    config_file = _resolve_config_path(config_path or Path.cwd())

    if not config_file.exists():
        if required:
            raise ConfigError(f"Config file not found: {config_file}")
        return Struct2JsonConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown keys in {config_file.name}: {', '.join(unknown)}")

    config = Struct2JsonConfig(source=config_file)
    if "type_mode" in data:
        config = replace(config, type_mode=_as_type_mode(data["type_mode"]))
    if "first_name_only" in data:
        config = replace(config, first_name_only=_as_bool("first_name_only", data["first_name_only"]))
    if "keep_going" in data:
        config = replace(config, keep_going=_as_bool("keep_going", data["keep_going"]))
    if "jobs" in data:
        config = replace(config, jobs=_as_positive_int("jobs", data["jobs"]))
    if "indent" in data:
        config = replace(config, indent=_as_non_negative_int("indent", data["indent"]))
    if "tags" in data:
        config = replace(config, tags=_as_str_tuple("tags", data["tags"]))
    return config


_KNOWN_KEYS = {"type_mode", "first_name_only", "keep_going", "jobs", "indent", "tags"}


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_type_mode(value: Any) -> TypeMode:
    try:
        return TypeMode(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(mode.value for mode in TypeMode)
        raise ConfigError(f"type_mode must be one of: {choices} (got {value!r})") from None


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"{key} must be a boolean (got {value!r})")


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer (got {value!r})")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise ConfigError(f"{key} must be an integer (got {value!r})")


def _as_positive_int(key: str, value: Any) -> int:
    number = _as_int(key, value)
    if number < 1:
        raise ConfigError(f"{key} must be at least 1 (got {number})")
    return number


def _as_non_negative_int(key: str, value: Any) -> int:
    number = _as_int(key, value)
    if number < 0:
        raise ConfigError(f"{key} must not be negative (got {number})")
    return number


def _as_str_tuple(key: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(dict.fromkeys(value))
    raise ConfigError(f"{key} must be a list of strings (got {value!r})")


__all__ = ["CONFIG_FILENAME", "ConfigError", "Struct2JsonConfig", "load_config"]
