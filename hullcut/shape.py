"""Basic 3D geometry: planes, normals, areas, volumes and a symmetric eigensolver."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]

INF = sys.float_info.max
_NAN3: Vec3 = (math.nan, math.nan, math.nan)


@dataclass
class Edge:
    """A segment between two points."""

    p0: Vec3 = (0.0, 0.0, 0.0)
    p1: Vec3 = (0.0, 0.0, 0.0)


@dataclass
class Plane:
    """The plane a*x + b*y + c*z + d = 0, optionally with a three-point form."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    p_flag: bool = False
    p0: Vec3 = field(default=(0.0, 0.0, 0.0))
    p1: Vec3 = field(default=(0.0, 0.0, 0.0))
    p2: Vec3 = field(default=(0.0, 0.0, 0.0))

    def _evaluate(self, p) -> float:
        return p[0] * self.a + p[1] * self.b + p[2] * self.c + self.d

    def cut_side(self, p0, p1, p2, plane: "Plane") -> int:
        """Return -1 if the triangle normal shares any axis sign with ``plane``, else 1."""
        normal = cal_face_normal(p0, p1, p2)
        if normal[0] * plane.a > 0 or normal[1] * plane.b > 0 or normal[2] * plane.c > 0:
            return -1
        return 1

    def bool_side(self, p) -> int:
        """Return 1 for points strictly on the positive side, otherwise -1."""
        return 1 if self._evaluate(p) > 0 else -1

    def side(self, p, eps: float = 1e-6) -> int:
        """Return 1, -1 or 0 (on the plane within ``eps``)."""
        res = self._evaluate(p)
        if res > eps:
            return 1
        if res < -eps:
            return -1
        return 0

    def intersect_segment(self, p1, p2, eps: float = 1e-6) -> tuple[Vec3, bool]:
        """Intersect the line through p1, p2 with the plane.

        Returns the intersection point and whether it lies on the segment
        (within ``eps`` per axis).
        """
        a, b, c, d = self.a, self.b, self.c, self.d
        denom = a * p2[0] - a * p1[0] + b * p2[1] - b * p1[1] + c * p2[2] - c * p1[2]
        if denom == 0:
            return _NAN3, False
        pi = (
            (p1[0] * b * p2[1] + p1[0] * c * p2[2] + p1[0] * d
             - p2[0] * b * p1[1] - p2[0] * c * p1[2] - p2[0] * d) / denom,
            (a * p2[0] * p1[1] + c * p1[1] * p2[2] + p1[1] * d
             - a * p1[0] * p2[1] - c * p1[2] * p2[1] - p2[1] * d) / denom,
            (a * p2[0] * p1[2] + b * p2[1] * p1[2] + p1[2] * d
             - a * p1[0] * p2[2] - b * p1[1] * p2[2] - p2[2] * d) / denom,
        )
        inside = all(
            min(p1[k] - eps, p2[k] - eps) <= pi[k] <= max(p1[k] + eps, p2[k] + eps)
            for k in range(3)
        )
        return pi, inside


def pt_norm(p) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(p[0] * p[0] + p[1] * p[1] + p[2] * p[2])


def same_point_detect(p0, p1, eps: float = 1e-5) -> bool:
    """True if the points agree within ``eps`` on every axis."""
    return all(abs(u - v) < eps for u, v in zip(p0, p1))


def same_vector_direction(v, w) -> bool:
    """True if the dot product of the two vectors is positive."""
    return v[0] * w[0] + v[1] * w[1] + v[2] * w[2] > 0


def cross_product(v, w) -> Vec3:
    return (
        v[1] * w[2] - v[2] * w[1],
        v[2] * w[0] - v[0] * w[2],
        v[0] * w[1] - v[1] * w[0],
    )


def cal_face_normal(p1, p2, p3) -> Vec3:
    """Unit normal of triangle p1 p2 p3; NaN components for a degenerate triangle."""
    v = (p2[0] - p1[0], p2[1] - p1[1], p2[2] - p1[2])
    w = (p3[0] - p1[0], p3[1] - p1[1], p3[2] - p1[2])
    n = cross_product(v, w)
    length = pt_norm(n)
    if length == 0:
        return _NAN3
    return (n[0] / length, n[1] / length, n[2] / length)


def area(p0, p1, p2) -> float:
    """Area of the triangle p0 p1 p2."""
    return 0.5 * math.sqrt(
        (p1[0] * p0[1] - p2[0] * p0[1] - p0[0] * p1[1] + p2[0] * p1[1] + p0[0] * p2[1] - p1[0] * p2[1]) ** 2
        + (p1[0] * p0[2] - p2[0] * p0[2] - p0[0] * p1[2] + p2[0] * p1[2] + p0[0] * p2[2] - p1[0] * p2[2]) ** 2
        + (p1[1] * p0[2] - p2[1] * p0[2] - p0[1] * p1[2] + p2[1] * p1[2] + p0[1] * p2[2] - p1[1] * p2[2]) ** 2
    )


def volume(p1, p2, p3) -> float:
    """Signed volume of the tetrahedron formed by the origin and the three points."""
    v321 = p3[0] * p2[1] * p1[2]
    v231 = p2[0] * p3[1] * p1[2]
    v312 = p3[0] * p1[1] * p2[2]
    v132 = p1[0] * p3[1] * p2[2]
    v213 = p2[0] * p1[1] * p3[2]
    v123 = p1[0] * p2[1] * p3[2]
    return (1.0 / 6.0) * (-v321 + v231 + v312 - v132 - v213 + v123)


def diagonalize(a) -> tuple[Mat3, Mat3]:
    """Diagonalise a symmetric 3x3 matrix by Jacobi rotations.

    Returns ``(Q, D)`` with ``D = Qt * A * Q`` diagonal and ``A = Q * D * Qt``.
    Only the upper triangle of ``a`` is read.
    """

    def sym(i: int, k: int) -> float:
        return a[min(i, k)][max(i, k)]

    max_steps = 24
    q = [0.0, 0.0, 0.0, 1.0]
    Q = [[0.0] * 3 for _ in range(3)]
    D = [[0.0] * 3 for _ in range(3)]
    for _ in range(max_steps):
        sqx, sqy, sqz, sqw = q[0] * q[0], q[1] * q[1], q[2] * q[2], q[3] * q[3]
        Q[0][0] = sqx - sqy - sqz + sqw
        Q[1][1] = -sqx + sqy - sqz + sqw
        Q[2][2] = -sqx - sqy + sqz + sqw
        tmp1, tmp2 = q[0] * q[1], q[2] * q[3]
        Q[1][0] = 2.0 * (tmp1 + tmp2)
        Q[0][1] = 2.0 * (tmp1 - tmp2)
        tmp1, tmp2 = q[0] * q[2], q[1] * q[3]
        Q[2][0] = 2.0 * (tmp1 - tmp2)
        Q[0][2] = 2.0 * (tmp1 + tmp2)
        tmp1, tmp2 = q[1] * q[2], q[0] * q[3]
        Q[2][1] = 2.0 * (tmp1 + tmp2)
        Q[1][2] = 2.0 * (tmp1 - tmp2)

        aq = [[sum(Q[k][j] * sym(i, k) for k in range(3)) for j in range(3)] for i in range(3)]
        D = [[sum(aq[k][i] * Q[k][j] for k in range(3)) for j in range(3)] for i in range(3)]

        o = (D[1][2], D[0][2], D[0][1])
        m = tuple(abs(x) for x in o)
        if m[0] > m[1] and m[0] > m[2]:
            k0 = 0
        elif m[1] > m[2]:
            k0 = 1
        else:
            k0 = 2
        k1 = (k0 + 1) % 3
        k2 = (k0 + 2) % 3
        if o[k0] == 0.0:
            break
        thet = (D[k2][k2] - D[k1][k1]) / (2.0 * o[k0])
        sgn = 1.0 if thet > 0.0 else -1.0
        thet *= sgn
        t = sgn / (thet + (math.sqrt(thet * thet + 1.0) if thet < 1.0e6 else thet))
        c = 1.0 / math.sqrt(t * t + 1.0)
        if c == 1.0:
            break
        jr = [0.0, 0.0, 0.0, 0.0]
        jr[k0] = -sgn * math.sqrt((1.0 - c) / 2.0)
        jr[3] = math.sqrt(1.0 - jr[k0] * jr[k0])
        if jr[3] == 1.0:
            break
        # Each component uses the already-updated earlier ones.
        q[0] = q[3] * jr[0] + q[0] * jr[3] + q[1] * jr[2] - q[2] * jr[1]
        q[1] = q[3] * jr[1] - q[0] * jr[2] + q[1] * jr[3] + q[2] * jr[0]
        q[2] = q[3] * jr[2] + q[0] * jr[1] - q[1] * jr[0] + q[2] * jr[3]
        q[3] = q[3] * jr[3] - q[0] * jr[0] - q[1] * jr[1] - q[2] * jr[2]
        mq = math.sqrt(sum(x * x for x in q))
        q = [x / mq for x in q]
    return (
        tuple(tuple(row) for row in Q),
        tuple(tuple(row) for row in D),
    )