from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from valuediff.core.value import Value

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class VisitedPair:
    id_a: int
    id_b: int
    declared_type: type | None


def pair_for(left: Value, right: Value) -> VisitedPair:
    id_a = left.identity()
    id_b = right.identity()
    if id_a > id_b:
        id_a, id_b = id_b, id_a
    return VisitedPair(id_a=id_a, id_b=id_b, declared_type=left.declared_type)


class CycleGuard:
    """Pairs of reference-like values already entered during one comparison.

    A revisited pair is assumed equal. The guard holds on to the objects behind
    each marked pair so their ids cannot be reused while the comparison runs.
    """

    __slots__ = ("_visited", "_pinned")

    def __init__(self) -> None:
        self._visited: set[VisitedPair] = set()
        self._pinned: list[Any] = []

    def seen(self, pair: VisitedPair) -> bool:
        return pair in self._visited

    def mark(self, pair: VisitedPair, *objects: Any) -> None:
        self._visited.add(pair)
        self._pinned.extend(objects)

    def visit(self, left: Value, right: Value) -> bool:
        """Return True when the pair was entered before, marking it otherwise."""
        pair = pair_for(left, right)
        if self.seen(pair):
            logger.debug("revisited %s pair %#x/%#x; assuming equal", left.shape, pair.id_a, pair.id_b)
            return True
        self.mark(pair, left.storage(), right.storage())
        return False

    def __len__(self) -> int:
        return len(self._visited)


__all__ = ["CycleGuard", "VisitedPair", "pair_for"]
