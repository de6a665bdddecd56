"""Three-component vectors used for positions, velocities and forces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

_Number = Union[int, float]

# Vectors shorter than this have no meaningful direction.
_MIN_DIRECTION_LENGTH = 1e-8


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector; a 2D simulation leaves ``z`` at zero."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | _Number) -> Vec3:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: _Number) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, scalar: _Number) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return (1 / scalar) * self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return " ".join(f"{component:g}" for component in self)


Position3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    """Scalar product of two vectors."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Vector product of two vectors."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to length one, or the zero vector if ``v`` is tiny."""
    length = v.length()
    if length < _MIN_DIRECTION_LENGTH:
        return Vec3()
    return v / length


def unit_normal(u: Vec3, v: Vec3) -> Vec3:
    """Unit vector pointing from ``u`` towards ``v``."""
    return unit_vector(v - u)