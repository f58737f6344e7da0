from __future__ import annotations

from collections.abc import Iterator


class PathStack:
    """Segments from the root to the value currently being compared."""

    __slots__ = ("_segments",)

    def __init__(self) -> None:
        self._segments: list[str] = []

    def push(self, segment: str) -> None:
        self._segments.append(segment)

    def pop(self) -> str:
        return self._segments.pop()

    def snapshot(self) -> list[str]:
        return list(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)


__all__ = ["PathStack"]
