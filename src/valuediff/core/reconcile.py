from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any


def reconcile_keys(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    *,
    render: Callable[[Any], str] = str,
) -> tuple[list[Any], list[Any], list[Any]]:
    """Split two key sets into (left_only, common, right_only), each sorted by rendering."""
    left_only: list[Any] = []
    common: list[Any] = []
    for key in left:
        if key in right:
            common.append(key)
        else:
            left_only.append(key)
    right_only = [key for key in right if key not in left]

    left_only.sort(key=render)
    common.sort(key=render)
    right_only.sort(key=render)
    return left_only, common, right_only


__all__ = ["reconcile_keys"]
