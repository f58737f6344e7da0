"""valuediff core — dynamic values and the recursive comparison engine.

Path stack, cycle guard, map key reconciliation, diff collection and the
shape-dispatching comparator. Nothing here depends on YAML, Typer or any file
format; decoding and the command line live outside this package.
"""
from __future__ import annotations

from valuediff.core.comparator import DiffContext, compare, deep_diff, deep_diff_values, deep_equal
from valuediff.core.guard import CycleGuard, VisitedPair, pair_for
from valuediff.core.models import Diff, DiffCollector
from valuediff.core.path import PathStack
from valuediff.core.reconcile import reconcile_keys
from valuediff.core.value import INVALID, Shape, Value, classify, wrap

__all__ = [
    "INVALID",
    "CycleGuard",
    "Diff",
    "DiffCollector",
    "DiffContext",
    "PathStack",
    "Shape",
    "Value",
    "VisitedPair",
    "classify",
    "compare",
    "deep_diff",
    "deep_diff_values",
    "deep_equal",
    "pair_for",
    "reconcile_keys",
    "wrap",
]
