"""
Planar Vector - immutable polar-form 2D vector.

Stores (length, angle) and goes through Cartesian coordinates for every
sum. The length is never negative: a negative magnitude is folded into the
angle by a half turn, so angle comparisons downstream stay meaningful.
"""

import dataclasses
import math

import numpy as np


class DomainError(ArithmeticError):
    """Raised for geometrically undefined operations (e.g. normalizing 0)."""


@dataclasses.dataclass(frozen=True)
class Vector:
    length: float
    angle: float

    def __post_init__(self):
        length = float(self.length)
        angle = float(self.angle)
        if length < 0:
            length, angle = -length, angle + math.pi
        object.__setattr__(self, "length", length)
        object.__setattr__(self, "angle", angle)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def from_cartesian(cls, x, y):
        return cls(float(np.hypot(x, y)), float(np.arctan2(y, x)))

    def to_cartesian(self):
        """Return (x, y)."""
        return (
            self.length * math.cos(self.angle),
            self.length * math.sin(self.angle),
        )

    @property
    def x(self):
        return self.to_cartesian()[0]

    @property
    def y(self):
        return self.to_cartesian()[1]

    def add(self, other: "Vector") -> "Vector":
        x, y = self.to_cartesian()
        x1, y1 = other.to_cartesian()
        return Vector.from_cartesian(x + x1, y + y1)

    def subtract(self, other: "Vector") -> "Vector":
        return self.add(other.scale(-1))

    def scale(self, factor: float) -> "Vector":
        if factor < 0:
            return Vector(self.length * -factor, self.angle + math.pi)
        return Vector(self.length * factor, self.angle)

    def normalize(self) -> "Vector":
        if self.length == 0:
            raise DomainError("cannot normalize a zero-length vector")
        return Vector(1.0, self.angle)

    def perpendicular(self) -> "Vector":
        return Vector(self.length, self.angle + math.pi / 2)

    def angle_difference(self, other: "Vector") -> float:
        """Unreduced ``self.angle - other.angle``."""
        return self.angle - other.angle

    def with_angle(self, angle: float) -> "Vector":
        return Vector(self.length, angle)

    def clamp_length(self, min_length: float, max_length: float) -> "Vector":
        lo, hi = sorted((abs(min_length), abs(max_length)))
        return Vector(float(np.clip(self.length, lo, hi)), self.angle)

    __add__ = add
    __sub__ = subtract

    def __mul__(self, factor):
        return self.scale(factor)

    __rmul__ = __mul__


def as_vector(value) -> Vector:
    """Accept a Vector or an (x, y) pair."""
    if isinstance(value, Vector):
        return value
    x, y = value
    return Vector.from_cartesian(x, y)
