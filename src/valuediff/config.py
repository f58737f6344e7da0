from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from valuediff.constants import DEFAULT_PATH_SEPARATOR, DEFAULT_PRIVATE_PREFIX
from valuediff.errors import ConfigError

_FILE_KEYS = ("private_prefix", "path_separator")


@dataclass(slots=True)
class DiffConfig:
    private_prefix: str = DEFAULT_PRIVATE_PREFIX
    path_separator: str = DEFAULT_PATH_SEPARATOR
    render: Callable[[Any], str] = repr
    key_render: Callable[[Any], str] = str


def _load_yaml(path: Path) -> dict[str, Any]:
    import yaml

    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {path}", details={"error": str(exc)}) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file must be a mapping: {path}")
    return loaded


def config_from_dict(data: dict[str, Any]) -> DiffConfig:
    unknown = sorted(str(key) for key in data if key not in _FILE_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", details={"unknown": unknown})
    values: dict[str, str] = {}
    for key in _FILE_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"Config field `{key}` must be a string, got: {value!r}")
        values[key] = value
    return DiffConfig(**values)


def load_config(path: Path) -> DiffConfig:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    return config_from_dict(_load_yaml(path))


__all__ = ["DiffConfig", "config_from_dict", "load_config"]
