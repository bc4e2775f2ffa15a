from __future__ import annotations

"""
Quaternion algebra and the sandwich-product rotation.

A Quaternion holds a vector part ``v`` (Vec3) and a scalar part ``s``. As a
rotation descriptor ``v`` is the axis and ``s`` the angle in degrees until
convert_to_unit_norm turns it into (axis * sin(θ/2), cos(θ/2)).
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable

import numpy as np

from utilities import MathUtils
from vector import Vec3, Vec4
from vector_config import DEFAULT_DTYPE, DISPLAY_DECIMALS, LOGGER_NAME

logger = logging.getLogger(f"{LOGGER_NAME}.quaternion")


@dataclass
class Quaternion:
    """Quaternion ``s + v`` with Hamilton product, inverse and rotation."""

    __array_ufunc__ = None

    v: Vec3
    s: float

    def __post_init__(self) -> None:
        if not isinstance(self.v, Vec3):
            try:
                self.v = Vec3.from_iterable(self.v)  # type: ignore[arg-type]
            except TypeError as exc:
                raise TypeError("v must be Vec3 or 3-element iterable") from exc

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Quaternion":
        """Build from (x, y, z, s)."""
        try:
            x, y, z, s = (float(value) for value in values)
        except (TypeError, ValueError) as exc:
            raise TypeError("Quaternion expects a 4-element iterable (x, y, z, s)") from exc
        return cls(Vec3(x, y, z), s)

    def copy(self) -> "Quaternion":
        return Quaternion(self.v.copy(), self.s)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.v.x, self.v.y, self.v.z, self.s)

    def to_numpy(self, dtype=DEFAULT_DTYPE) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=dtype)

    def to_vec4(self) -> Vec4:
        return Vec4(self.v.x, self.v.y, self.v.z, self.s)

    def norm(self) -> float:
        return math.sqrt(self.s * self.s + self.v * self.v)

    def normalize(self) -> None:
        """Scale to unit norm in place; a zero quaternion is left as is."""
        norm = self.norm()
        if norm > 0.0:
            nv = MathUtils.reciprocal(norm)
            self.v = self.v * nv
            self.s *= nv
        else:
            logger.debug("Zero-norm %s left unnormalized", self)

    def get_normalize(self) -> "Quaternion":
        norm = self.norm()
        if norm > 0.0:
            nv = MathUtils.reciprocal(norm)
            return Quaternion(self.v * nv, self.s * nv)
        logger.debug("Zero-norm %s left unnormalized", self)
        return self.copy()

    def convert_to_unit_norm(self) -> None:
        """Reinterpret ``s`` as degrees and build the unit rotation in place.

        The angle is read first, then the axis alone is normalized, then s and
        v are overwritten with cos(θ/2) and axis*sin(θ/2). The result has unit
        norm for any nonzero axis; a zero axis stays zero. This differs from
        normalizing the full quaternion first, which would fold the
        degree-valued s into the norm and leave a non-unit result.
        """
        angle = self.s * math.pi / 180.0
        self.v = self.v.get_normalize()
        cos_half, sin_half = MathUtils.half_angle_terms(angle)
        self.s = cos_half
        self.v = self.v * sin_half

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.v, self.s)

    def inverse(self) -> "Quaternion":
        """Conjugate with v scaled by 1/norm² and s scaled by norm.

        Matches the textbook inverse only for unit quaternions.
        """
        norm = self.norm()
        conj = self.conjugate()
        return Quaternion(conj.v * MathUtils.reciprocal(norm * norm), conj.s * norm)

    def rotate(self, rhs: "Quaternion") -> Vec3:
        """Rotate the vector part of ``self`` by ``rhs`` (axis, angle in degrees).

        The axis is normalized, the descriptor converted to a unit rotation q,
        and the vector part of ``q * self * q.inverse()`` returned.
        """
        q = rhs.copy()
        q.v.normalize()
        q.convert_to_unit_norm()
        logger.debug("Rotating %s by unit quaternion %s", self.v, q)
        return (q * self * q.inverse()).v

    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.v + other.v, self.s + other.s)

    def __iadd__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        self.v = self.v + other.v
        self.s += other.s
        return self

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.v - other.v, self.s - other.s)

    def __isub__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        self.v = self.v - other.v
        self.s -= other.s
        return self

    def __mul__(self, other):
        # Hamilton product keeps operand order; scalars only on the right
        if isinstance(other, Quaternion):
            return Quaternion(
                other.v * self.s + self.v * other.s + self.v.cross(other.v),
                self.s * other.s - self.v.dot(other.v),
            )
        if isinstance(other, Real):
            return Quaternion(self.v * other, self.s * other)
        return NotImplemented

    def __imul__(self, other) -> "Quaternion":
        product = self.__mul__(other)
        if product is NotImplemented:
            return NotImplemented
        self.v = product.v
        self.s = product.s
        return self

    def __str__(self) -> str:
        return f"Quaternion(v: {self.v}, s: {self.s:.{DISPLAY_DECIMALS}f})"

    def __iter__(self):
        yield from self.as_tuple()

    def __len__(self) -> int:
        return 4
