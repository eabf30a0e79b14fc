"""Planes, rays and distance helpers for the convex hull builder."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from hullcut.vector3 import Vector3


@dataclass(frozen=True)
class HullPlane:
    """Plane n . x + d = 0 with a possibly non-unit normal ``n``."""

    n: Vector3 = Vector3()
    d: float = 0.0
    sqr_n_length: float = 0.0

    @classmethod
    def from_normal_and_point(cls, normal: Vector3, point: Vector3) -> HullPlane:
        """Plane with the given normal passing through ``point``."""
        return cls(normal, -normal.dot(point), normal.length_squared())

    def is_point_on_positive_side(self, q: Vector3) -> bool:
        """True if ``q`` lies on the plane or on its positive side."""
        return self.n.dot(q) + self.d >= 0


@dataclass(frozen=True)
class Ray:
    """Line through ``s`` with direction ``v``."""

    s: Vector3
    v: Vector3
    v_inv_length_squared: float = field(init=False)

    def __post_init__(self) -> None:
        length_squared = self.v.length_squared()
        inv = 1.0 / length_squared if length_squared else math.inf
        object.__setattr__(self, "v_inv_length_squared", inv)


def squared_distance_point_ray(p: Vector3, r: Ray) -> float:
    """Squared distance from ``p`` to the line carrying ``r``."""
    s = p - r.s
    t = s.dot(r.v)
    return s.length_squared() - t * t * r.v_inv_length_squared


def signed_distance_to_plane(v: Vector3, p: HullPlane) -> float:
    """Signed distance, in units of the plane normal's length."""
    return p.n.dot(v) + p.d


def triangle_normal(a: Vector3, b: Vector3, c: Vector3) -> Vector3:
    """Unnormalised normal (a - c) x (b - c)."""
    return (a - c).cross(b - c)