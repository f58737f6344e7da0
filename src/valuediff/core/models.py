from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from valuediff.core.value import Value


@dataclass(slots=True)
class Diff:
    path: list[str] = field(default_factory=list)
    left: Any = None
    right: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "left": self.left, "right": self.right}


class DiffCollector:
    """Append-only record of diffs in depth-first emission order."""

    __slots__ = ("_diffs",)

    def __init__(self) -> None:
        self._diffs: list[Diff] = []

    def record(
        self,
        path: list[str],
        left: Value,
        right: Value,
        render: Callable[[Any], str] = repr,
    ) -> Diff:
        diff = Diff(path=path, left=left.payload(render), right=right.payload(render))
        self._diffs.append(diff)
        return diff

    def as_list(self) -> list[Diff]:
        return list(self._diffs)

    def __len__(self) -> int:
        return len(self._diffs)

    def __iter__(self) -> Iterator[Diff]:
        return iter(self._diffs)


__all__ = ["Diff", "DiffCollector"]
