"""A small immutable 3D vector used by the convex hull builder."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """Three-component vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, c: float) -> Vector3:
        return Vector3(self.x * c, self.y * c, self.z * c)

    __rmul__ = __mul__

    def __truediv__(self, c: float) -> Vector3:
        return Vector3(self.x / c, self.y / c, self.z / c)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector3:
        """This vector scaled to unit length."""
        return self / self.length()

    def projection(self, other: Vector3) -> Vector3:
        """Projection of this vector onto ``other``."""
        return other * (self.dot(other) / other.length_squared())

    def distance_to(self, other: Vector3) -> float:
        return (self - other).length()

    def squared_distance_to(self, other: Vector3) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz