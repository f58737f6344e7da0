from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from typing import Any

from valuediff.core.models import Diff


def _normalize_float(value: float) -> float | str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


def normalize_for_json(value: Any, _active: frozenset[int] = frozenset()) -> Any:
    if id(value) in _active:
        return "<cycle>"
    if isinstance(value, Mapping):
        active = _active | {id(value)}
        return {str(key): normalize_for_json(value[key], active) for key in sorted(value.keys(), key=str)}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        active = _active | {id(value)}
        return [normalize_for_json(item, active) for item in value]
    if is_dataclass(value) and not isinstance(value, type):
        active = _active | {id(value)}
        return {item.name: normalize_for_json(getattr(value, item.name, None), active) for item in fields(value)}
    if isinstance(value, float):
        return _normalize_float(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if value is None or isinstance(value, (str, int, bool)):
        return value
    return repr(value)


def canonical_dumps(value: Any) -> str:
    normalized = normalize_for_json(value)
    return json.dumps(normalized, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def diff_to_json_line(diff: Diff, separator: str = ".") -> str:
    payload = diff.to_dict()
    payload["location"] = separator.join(diff.path)
    return canonical_dumps(payload)


__all__ = ["canonical_dumps", "diff_to_json_line", "normalize_for_json"]
