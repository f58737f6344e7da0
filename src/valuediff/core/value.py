"""Dynamic values: a closed tagged variant over native Python objects.

``wrap`` classifies a native object into one of the shapes the comparator
knows how to walk. Callers that already hold ``Value`` handles (for example a
typed nil such as ``Value("MAPPING", None, dict)``) can build them directly.
"""
from __future__ import annotations

import asyncio
import dataclasses
import datetime
import enum
import functools
import inspect
import numbers
import queue
import types
import weakref
from collections.abc import Callable, Mapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from valuediff.constants import (
    DEFAULT_PRIVATE_PREFIX,
    NILLABLE_SHAPES,
    SHAPE_BOXED,
    SHAPE_FIXED_SEQUENCE,
    SHAPE_GROWABLE_SEQUENCE,
    SHAPE_INVALID,
    SHAPE_MAPPING,
    SHAPE_OPAQUE,
    SHAPE_RECORD,
    SHAPE_REFERENCE,
    SHAPE_SCALAR,
)

Shape = Literal[
    "INVALID",
    "SCALAR",
    "FIXED_SEQUENCE",
    "GROWABLE_SEQUENCE",
    "MAPPING",
    "RECORD",
    "REFERENCE",
    "BOXED",
    "OPAQUE",
]

SHAPES = frozenset(
    {
        SHAPE_INVALID,
        SHAPE_SCALAR,
        SHAPE_FIXED_SEQUENCE,
        SHAPE_GROWABLE_SEQUENCE,
        SHAPE_MAPPING,
        SHAPE_RECORD,
        SHAPE_REFERENCE,
        SHAPE_BOXED,
        SHAPE_OPAQUE,
    }
)

_SCALAR_TYPES = (
    type(None),
    bool,
    numbers.Number,
    str,
    bytes,
    bytearray,
    memoryview,
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    range,
    set,
    frozenset,
    type,
)

_OPAQUE_TYPES = (
    functools.partial,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.ModuleType,
    queue.Queue,
    asyncio.Queue,
)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _is_plain_object(obj: Any) -> bool:
    cls = type(obj)
    if cls.__eq__ is not object.__eq__:
        return False
    return hasattr(obj, "__dict__") or bool(_slot_names(cls))


def _attribute_names(obj: Any) -> list[str]:
    names = _slot_names(type(obj))
    for name in getattr(obj, "__dict__", {}):
        if name not in names:
            names.append(name)
    return names


def classify(obj: Any) -> Shape:
    if isinstance(obj, Value):
        return SHAPE_BOXED
    if isinstance(obj, _SCALAR_TYPES):
        return SHAPE_SCALAR
    if isinstance(obj, weakref.ref):
        return SHAPE_REFERENCE
    if isinstance(obj, Mapping):
        return SHAPE_MAPPING
    if isinstance(obj, tuple) and hasattr(type(obj), "_fields"):
        return SHAPE_RECORD
    if isinstance(obj, MutableSequence):
        return SHAPE_GROWABLE_SEQUENCE
    if isinstance(obj, Sequence):
        return SHAPE_FIXED_SEQUENCE
    if dataclasses.is_dataclass(obj):
        return SHAPE_RECORD
    if inspect.isroutine(obj) or isinstance(obj, _OPAQUE_TYPES):
        return SHAPE_OPAQUE
    if _is_plain_object(obj):
        return SHAPE_RECORD
    return SHAPE_SCALAR


@dataclass(slots=True, frozen=True)
class Value:
    shape: Shape
    raw: Any = None
    declared_type: type | None = None
    exported: bool = True

    def __post_init__(self) -> None:
        if self.shape not in SHAPES:
            raise ValueError(f"Unknown value shape: {self.shape!r}")
        if self.raw is None and self.shape in (SHAPE_FIXED_SEQUENCE, SHAPE_RECORD):
            raise ValueError(f"{self.shape} values cannot be nil")

    def is_valid(self) -> bool:
        return self.shape != SHAPE_INVALID

    def is_nil(self) -> bool:
        """Typed nil: a reference-like or opaque value with nothing behind it."""
        if self.shape not in NILLABLE_SHAPES:
            return False
        if self.raw is None:
            return True
        if self.shape == SHAPE_REFERENCE:
            return self.raw() is None
        if self.shape == SHAPE_BOXED:
            return not self.raw.is_valid()
        return False

    def same_type(self, other: Value) -> bool:
        if self.shape != other.shape or self.declared_type is not other.declared_type:
            return False
        # Fixed sequences carry their length in the type, like fixed-size arrays.
        if self.shape == SHAPE_FIXED_SEQUENCE:
            return len(self.raw) == len(other.raw)
        return True

    def storage(self) -> Any:
        """The object whose identity stands for this value's underlying storage."""
        if self.shape == SHAPE_REFERENCE:
            return self.raw()
        return self.raw

    def identity(self) -> int:
        return id(self.storage())

    def length(self) -> int:
        return len(self.raw)

    def index(self, position: int) -> Value:
        return wrap(self.raw[position], exported=self.exported)

    def keys(self) -> list[Any]:
        return list(self.raw.keys())

    def lookup(self, key: Any) -> Value:
        if key not in self.raw:
            return INVALID
        return wrap(self.raw[key], exported=self.exported)

    def field_names(self, other: Value | None = None) -> list[str]:
        if dataclasses.is_dataclass(self.raw):
            return [item.name for item in dataclasses.fields(self.raw)]
        if isinstance(self.raw, tuple):
            return list(self.raw._fields)
        names = _attribute_names(self.raw)
        # Exception state lives in C-level `args`, outside `__dict__`.
        if isinstance(self.raw, BaseException):
            names.insert(0, "args")
        if other is not None:
            names.extend(name for name in _attribute_names(other.raw) if name not in names)
        return names

    def field(self, name: str, private_prefix: str = DEFAULT_PRIVATE_PREFIX) -> Value:
        try:
            child = getattr(self.raw, name)
        except AttributeError:
            return INVALID
        private = bool(private_prefix) and name.startswith(private_prefix)
        return wrap(child, exported=self.exported and not private)

    def elem(self) -> Value:
        """Referent of a reference, or the inner value of a box."""
        if self.shape == SHAPE_REFERENCE:
            return wrap(self.raw(), exported=self.exported)
        if self.shape == SHAPE_BOXED:
            inner = self.raw
            if not self.exported and inner.exported:
                return dataclasses.replace(inner, exported=False)
            return inner
        raise TypeError(f"{self.shape} values have no element")

    def payload(self, render: Callable[[Any], str] = repr) -> Any:
        """The form reported in a diff: raw when exported, rendered text otherwise."""
        if self.shape == SHAPE_INVALID:
            return None
        if self.shape == SHAPE_BOXED:
            return None if self.is_nil() else self.elem().payload(render)
        if not self.exported:
            return render(self.raw)
        return self.raw


INVALID = Value(SHAPE_INVALID)


def wrap(obj: Any, *, exported: bool = True) -> Value:
    return Value(classify(obj), obj, type(obj), exported)


__all__ = [
    "INVALID",
    "SHAPES",
    "Shape",
    "Value",
    "classify",
    "wrap",
]
