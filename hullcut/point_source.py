"""Read-only point storage and a simple object pool."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from hullcut.vector3 import Vector3

T = TypeVar("T")


class PointSource:
    """An immutable, indexable sequence of points."""

    def __init__(self, points: Iterable[Vector3 | Iterable[float]] = ()) -> None:
        self._points: tuple[Vector3, ...] = tuple(
            p if isinstance(p, Vector3) else Vector3(*p) for p in points
        )

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Vector3:
        return self._points[index]

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"PointSource({list(self._points)!r})"


class Pool(Generic[T]):
    """Keeps spare objects for reuse; hands out new ones when empty."""

    def __init__(self, factory: Callable[[], T] = list) -> None:
        self._factory = factory
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def reclaim(self, item: T) -> None:
        """Return an object to the pool."""
        self._items.append(item)

    def get(self) -> T:
        """Most recently reclaimed object, or a fresh one."""
        if self._items:
            return self._items.pop()
        return self._factory()