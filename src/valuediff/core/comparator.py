"""Recursive structural comparison of dynamic values.

``compare`` pushes an optional path segment, asks the shape handler whether
the pair is explained, and records a single diff for the pair when it is not.
Composite handlers explain themselves by recursing, so diffs only ever appear
at the finest level the walk could reach.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from valuediff.config import DiffConfig
from valuediff.constants import (
    CYCLE_TRACKED_SHAPES,
    SHAPE_BOXED,
    SHAPE_FIXED_SEQUENCE,
    SHAPE_GROWABLE_SEQUENCE,
    SHAPE_MAPPING,
    SHAPE_OPAQUE,
    SHAPE_RECORD,
    SHAPE_REFERENCE,
)
from valuediff.core.guard import CycleGuard
from valuediff.core.models import Diff, DiffCollector
from valuediff.core.path import PathStack
from valuediff.core.reconcile import reconcile_keys
from valuediff.core.value import INVALID, Value, wrap

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DiffContext:
    config: DiffConfig = field(default_factory=DiffConfig)
    path: PathStack = field(default_factory=PathStack)
    guard: CycleGuard = field(default_factory=CycleGuard)
    diffs: DiffCollector = field(default_factory=DiffCollector)


def deep_equal(left: Any, right: Any) -> bool:
    return bool(left == right)


def compare(ctx: DiffContext, left: Value, right: Value, segment: str | None = None) -> bool:
    if segment:
        ctx.path.push(segment)
    try:
        if not _explain(ctx, left, right):
            ctx.diffs.record(ctx.path.snapshot(), left, right, ctx.config.render)
        return True
    finally:
        if segment:
            ctx.path.pop()


def _explain(ctx: DiffContext, left: Value, right: Value) -> bool:
    if left.is_valid() != right.is_valid():
        return False
    if not left.is_valid():
        return True
    if not left.same_type(right):
        return False

    if left.shape in CYCLE_TRACKED_SHAPES and not left.is_nil() and not right.is_nil():
        if ctx.guard.visit(left, right):
            return True

    handler = _HANDLERS.get(left.shape, _explain_scalar)
    return handler(ctx, left, right)


def _explain_fixed_sequence(ctx: DiffContext, left: Value, right: Value) -> bool:
    for position in range(left.length()):
        compare(ctx, left.index(position), right.index(position), str(position))
    return True


def _explain_growable_sequence(ctx: DiffContext, left: Value, right: Value) -> bool:
    if left.is_nil() or right.is_nil():
        return left.is_nil() == right.is_nil()
    if left.raw is right.raw:
        return True
    if left.length() != right.length():
        return False
    for position in range(left.length()):
        compare(ctx, left.index(position), right.index(position), str(position))
    return True


def _explain_boxed(ctx: DiffContext, left: Value, right: Value) -> bool:
    if left.is_nil() or right.is_nil():
        return left.is_nil() == right.is_nil()
    compare(ctx, left.elem(), right.elem())
    return True


def _explain_reference(ctx: DiffContext, left: Value, right: Value) -> bool:
    if left.is_nil() or right.is_nil():
        return left.is_nil() == right.is_nil()
    if left.storage() is right.storage():
        return True
    compare(ctx, left.elem(), right.elem())
    return True


def _explain_record(ctx: DiffContext, left: Value, right: Value) -> bool:
    names = left.field_names(right)
    if not names:
        return deep_equal(left.raw, right.raw)
    prefix = ctx.config.private_prefix
    for name in names:
        compare(ctx, left.field(name, prefix), right.field(name, prefix), name)
    return True


def _explain_mapping(ctx: DiffContext, left: Value, right: Value) -> bool:
    if left.is_nil() or right.is_nil():
        return left.is_nil() == right.is_nil()
    if left.raw is right.raw:
        return True

    key_render = ctx.config.key_render
    left_only, common, right_only = reconcile_keys(left.raw, right.raw, render=key_render)
    for key in left_only:
        compare(ctx, left.lookup(key), INVALID, key_render(key))
    for key in right_only:
        compare(ctx, INVALID, right.lookup(key), key_render(key))
    for key in common:
        compare(ctx, left.lookup(key), right.lookup(key), key_render(key))
    return True


def _explain_opaque(ctx: DiffContext, left: Value, right: Value) -> bool:
    if left.is_nil() or right.is_nil():
        return left.is_nil() == right.is_nil()
    if left.raw is right.raw:
        return True
    return _explain_scalar(ctx, left, right)


def _explain_scalar(ctx: DiffContext, left: Value, right: Value) -> bool:
    return deep_equal(left.raw, right.raw)


_HANDLERS: dict[str, Callable[[DiffContext, Value, Value], bool]] = {
    SHAPE_FIXED_SEQUENCE: _explain_fixed_sequence,
    SHAPE_GROWABLE_SEQUENCE: _explain_growable_sequence,
    SHAPE_BOXED: _explain_boxed,
    SHAPE_REFERENCE: _explain_reference,
    SHAPE_RECORD: _explain_record,
    SHAPE_MAPPING: _explain_mapping,
    SHAPE_OPAQUE: _explain_opaque,
}


def deep_diff_values(left: Value, right: Value, *, config: DiffConfig | None = None) -> list[Diff]:
    ctx = DiffContext(config=config or DiffConfig())
    compare(ctx, left, right)
    logger.debug("deep diff produced %d diff(s), %d visited pair(s)", len(ctx.diffs), len(ctx.guard))
    return ctx.diffs.as_list()


def deep_diff(left: Any, right: Any, *, config: DiffConfig | None = None) -> list[Diff]:
    return deep_diff_values(wrap(left), wrap(right), config=config)


__all__ = [
    "DiffContext",
    "compare",
    "deep_diff",
    "deep_diff_values",
    "deep_equal",
]
