"""Helpers for the packed upper-triangle cost matrix and mesh edge maps."""

from __future__ import annotations

import sys
from collections.abc import MutableMapping, Sequence

INF = sys.float_info.max


def find_minimum_element(
    d: Sequence[float], begin: int = 0, end: int | None = None
) -> tuple[int, float]:
    """Return ``(index, value)`` of the first smallest entry in ``d[begin:end]``.

    Entries not below the largest float are ignored; if none qualifies the
    result is ``(-1, INF)``.
    """
    if end is None:
        end = len(d)
    idx = -1
    best = INF
    for i in range(begin, end):
        if d[i] < best:
            idx = i
            best = d[i]
    return idx, best


def edge_neighbors(
    edge_map: MutableMapping[tuple[int, int], tuple[int, int]],
    edge: tuple[int, int],
    idx: int,
) -> list[int]:
    """Triangles sharing ``edge`` other than ``idx``, skipping -1 slots.

    An edge missing from ``edge_map`` is entered as ``(0, 0)``.
    """
    first, second = edge_map.setdefault(edge, (0, 0))
    return [t for t in (first, second) if t != idx and t != -1]