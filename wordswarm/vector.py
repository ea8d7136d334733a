"""Immutable 2-D vector used for particle positions and velocities."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    x: float = 0.0
    y: float = 0.0

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def unit(self) -> "Vector":
        """Direction of this vector; the zero vector maps to itself instead of NaN."""
        mag = self.magnitude()
        if mag == 0:
            return Vector(0.0, 0.0)
        return Vector(self.x / mag, self.y / mag)

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.scale(scalar)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)


__all__ = ["Vector"]
