"""Structural, path-labelled differences between arbitrarily nested values."""
from __future__ import annotations

from valuediff.config import DiffConfig
from valuediff.core import INVALID, Diff, Shape, Value, deep_diff, deep_diff_values, wrap
from valuediff.errors import ConfigError, DecodeError, ValueDiffError

__version__ = "0.1.0"

__all__ = [
    "INVALID",
    "ConfigError",
    "DecodeError",
    "Diff",
    "DiffConfig",
    "Shape",
    "Value",
    "ValueDiffError",
    "__version__",
    "deep_diff",
    "deep_diff_values",
    "wrap",
]
