"""Decoders that turn encoded text into native values for ``deep_diff``."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from valuediff.constants import JSON_SUFFIXES, SUPPORTED_INPUT_FORMATS, YAML_SUFFIXES
from valuediff.errors import ERROR_CODE_DECODE_UNSUPPORTED_FORMAT, DecodeError


def from_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(
            f"Malformed JSON {text[:40]!r}: {exc.msg}",
            details={"line": exc.lineno, "column": exc.colno},
        ) from exc


def from_yaml(text: str) -> Any:
    import yaml

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DecodeError(f"Malformed YAML {text[:40]!r}", details={"error": str(exc)}) from exc


def detect_format(path: Path, fmt: str = "auto") -> str:
    if fmt not in SUPPORTED_INPUT_FORMATS:
        supported = ", ".join(SUPPORTED_INPUT_FORMATS)
        raise DecodeError(
            f"Unsupported input format {fmt!r}; expected one of: {supported}",
            code=ERROR_CODE_DECODE_UNSUPPORTED_FORMAT,
        )
    if fmt != "auto":
        return fmt
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise DecodeError(
        f"Cannot infer input format from file name: {path}",
        code=ERROR_CODE_DECODE_UNSUPPORTED_FORMAT,
    )


def load_document(path: Path, fmt: str = "auto") -> Any:
    resolved = detect_format(path, fmt)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"Input is not valid UTF-8: {path}",
            details={"position": exc.start, "reason": exc.reason},
        ) from exc
    if resolved == "json":
        return from_json(text)
    return from_yaml(text)


__all__ = ["detect_format", "from_json", "from_yaml", "load_document"]
