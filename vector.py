from __future__ import annotations

"""
Vector classes for 2D, 3D and 4D operations.

Provides Vec2, Vec3 and Vec4 value types with arithmetic operators, in-place
variants, conversions and the vector algebra the quaternion type builds on.
Equality is exact per component; use MathUtils.vectors_close for tolerances.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Iterable

import numpy as np

from utilities import MathUtils
from vector_config import DEFAULT_DTYPE, DISPLAY_DECIMALS, LOGGER_NAME

if TYPE_CHECKING:
    from quaternion import Quaternion

logger = logging.getLogger(f"{LOGGER_NAME}.vector")


def _fmt(value: float) -> str:
    return f"{value:.{DISPLAY_DECIMALS}f}"


def _unpack(values: Iterable[float], count: int, name: str) -> list[float]:
    try:
        items = [float(v) for v in values]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"{name} expects a {count}-element iterable of numbers") from exc
    if len(items) != count:
        raise TypeError(f"{name} expects a {count}-element iterable, got {len(items)}")
    return items


@dataclass
class Vec2:
    """2D vector with componentwise arithmetic and the 2D cross scalar."""

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    x: float
    y: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec2":
        vx, vy = _unpack(values, 2, "Vec2")
        return cls(vx, vy)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_numpy(self, dtype=DEFAULT_DTYPE) -> np.ndarray:
        return np.array([self.x, self.y], dtype=dtype)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def scalar(self, other: "Vec2") -> float:
        """Scalar (dot) product, same as ``self * other``."""
        return self.dot(other)

    def magnitude(self, other: "Vec2") -> float:
        """2D cross scalar: z-component of the 3D cross of the two vectors."""
        return (self.x * other.y) - (self.y * other.x)

    def perpendicular(self) -> "Vec2":
        """Return the vector rotated 90° clockwise."""
        return Vec2(self.y, -self.x)

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __isub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, other):
        # Vec2 * Vec2 is the dot product, Vec2 * scalar scales
        if isinstance(other, Vec2):
            return self.dot(other)
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vec2":
        if isinstance(scalar, Vec2):
            raise TypeError("in-place Vec2 * Vec2 would produce a scalar; use dot()")
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __truediv__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(MathUtils.ieee_divide(self.x, scalar),
                    MathUtils.ieee_divide(self.y, scalar))

    def __itruediv__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x = MathUtils.ieee_divide(self.x, scalar)
        self.y = MathUtils.ieee_divide(self.y, scalar)
        return self

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"Vec2(x: {_fmt(self.x)}, y: {_fmt(self.y)})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        raise IndexError("Vec2 index out of range")

    def __setitem__(self, idx: int, value: float) -> None:
        if idx == 0:
            self.x = float(value)
        elif idx == 1:
            self.y = float(value)
        else:
            raise IndexError("Vec2 index out of range")


@dataclass
class Vec3:
    """3D vector: dot, cross, normalization and componentwise arithmetic.

    ``a * b`` is the dot product when ``b`` is a Vec3 and a scaled vector when
    ``b`` is a number. ``a % b`` is the cross product.
    """

    __array_ufunc__ = None

    x: float
    y: float
    z: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec3":
        vx, vy, vz = _unpack(values, 3, "Vec3")
        return cls(vx, vy, vz)

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self, dtype=DEFAULT_DTYPE) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def norm(self) -> float:
        return self.magnitude()

    def get_normalize(self) -> "Vec3":
        """Return the unit vector; a zero vector comes back unchanged."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            return self * MathUtils.reciprocal(magnitude)
        logger.debug("Zero-length %s left unnormalized", self)
        return self.copy()

    def normalize(self) -> None:
        """Normalize in place; a zero vector is left as is."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            self *= MathUtils.reciprocal(magnitude)
        else:
            logger.debug("Zero-length %s left unnormalized", self)

    def perpendicular(self, other: "Vec3") -> "Vec3":
        """Return ``self`` scaled by ``self . other``.

        Not a perpendicular-component decomposition despite the name.
        """
        return self * self.dot(other)

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.x * other.x + self.y * other.y + self.z * other.z
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __imul__(self, scalar: float) -> "Vec3":
        if isinstance(scalar, Vec3):
            raise TypeError("in-place Vec3 * Vec3 would produce a scalar; use dot()")
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __truediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(
            MathUtils.ieee_divide(self.x, scalar),
            MathUtils.ieee_divide(self.y, scalar),
            MathUtils.ieee_divide(self.z, scalar),
        )

    def __itruediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x = MathUtils.ieee_divide(self.x, scalar)
        self.y = MathUtils.ieee_divide(self.y, scalar)
        self.z = MathUtils.ieee_divide(self.z, scalar)
        return self

    def __mod__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.cross(other)

    def __imod__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x, self.y, self.z = self.cross(other).as_tuple()
        return self

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"Vec3(x: {_fmt(self.x)}, y: {_fmt(self.y)}, z: {_fmt(self.z)})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        if idx == 2:
            return self.z
        raise IndexError("Vec3 index out of range")

    def __setitem__(self, idx: int, value: float) -> None:
        if idx == 0:
            self.x = float(value)
        elif idx == 1:
            self.y = float(value)
        elif idx == 2:
            self.z = float(value)
        else:
            raise IndexError("Vec3 index out of range")


@dataclass
class Vec4:
    """4D vector, either a homogeneous point or an (axis, angle) quaternion.

    As a homogeneous point ``w`` is the perspective divisor (``to_vec3``).
    As a quaternion ``(x, y, z)`` is the vector part and ``w`` the scalar part;
    ``rotate``, ``inverse``, ``conjugate`` and ``convert_to_unit_norm`` go
    through Quaternion so both types agree exactly.
    """

    __array_ufunc__ = None

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec4":
        vx, vy, vz, vw = _unpack(values, 4, "Vec4")
        return cls(vx, vy, vz, vw)

    def copy(self) -> "Vec4":
        return Vec4(self.x, self.y, self.z, self.w)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def to_numpy(self, dtype=DEFAULT_DTYPE) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=dtype)

    def to_vec3(self) -> Vec3:
        """Perspective divide: (x/w, y/w, z/w)."""
        return Vec3(
            MathUtils.ieee_divide(self.x, self.w),
            MathUtils.ieee_divide(self.y, self.w),
            MathUtils.ieee_divide(self.z, self.w),
        )

    def to_pure_vec3(self) -> Vec3:
        """Drop w without dividing."""
        return Vec3(self.x, self.y, self.z)

    def as_quaternion(self) -> "Quaternion":
        from quaternion import Quaternion

        return Quaternion(Vec3(self.x, self.y, self.z), self.w)

    def norm(self) -> float:
        """Magnitude of the (x, y, z) part; w is the homogeneous coordinate."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def get_normalize(self) -> "Vec4":
        norm = self.norm()
        if norm > 0.0:
            mag = MathUtils.reciprocal(norm)
            return Vec4(self.x * mag, self.y * mag, self.z * mag, self.w * mag)
        logger.debug("Zero-length %s left unnormalized", self)
        return self.copy()

    def normalize(self) -> None:
        norm = self.norm()
        if norm > 0.0:
            mag = MathUtils.reciprocal(norm)
            self.x *= mag
            self.y *= mag
            self.z *= mag
            self.w *= mag
        else:
            logger.debug("Zero-length %s left unnormalized", self)

    def convert_to_unit_norm(self) -> None:
        """Turn (axis, angle in degrees) into a unit rotation, in place."""
        q = self.as_quaternion()
        q.convert_to_unit_norm()
        self.x, self.y, self.z, self.w = q.as_tuple()

    def conjugate(self) -> "Vec4":
        return self.as_quaternion().conjugate().to_vec4()

    def inverse(self) -> "Vec4":
        return self.as_quaternion().inverse().to_vec4()

    def rotate(self, rhs: "Vec4") -> Vec3:
        """Rotate (x, y, z) about the axis ``rhs.xyz`` by ``rhs.w`` degrees."""
        return self.as_quaternion().rotate(rhs.as_quaternion())

    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __iadd__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __isub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def __mul__(self, other):
        # componentwise; there is no 4D dot or cross
        if isinstance(other, Vec4):
            return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        if isinstance(other, Real):
            return Vec4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vec4":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __imul__(self, other) -> "Vec4":
        product = self.__mul__(other)
        if product is NotImplemented:
            return NotImplemented
        self.x, self.y, self.z, self.w = product.as_tuple()
        return self

    def __truediv__(self, other):
        if isinstance(other, Vec4):
            divisors = other.as_tuple()
        elif isinstance(other, Real):
            divisors = (other,) * 4
        else:
            return NotImplemented
        return Vec4(*(MathUtils.ieee_divide(a, b) for a, b in zip(self.as_tuple(), divisors)))

    def __itruediv__(self, other) -> "Vec4":
        quotient = self.__truediv__(other)
        if quotient is NotImplemented:
            return NotImplemented
        self.x, self.y, self.z, self.w = quotient.as_tuple()
        return self

    def __neg__(self) -> "Vec4":
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __str__(self) -> str:
        return (f"Vec4(x: {_fmt(self.x)}, y: {_fmt(self.y)}, "
                f"z: {_fmt(self.z)}, w: {_fmt(self.w)})")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return 4

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        if idx == 2:
            return self.z
        if idx == 3:
            return self.w
        raise IndexError("Vec4 index out of range")

    def __setitem__(self, idx: int, value: float) -> None:
        if idx == 0:
            self.x = float(value)
        elif idx == 1:
            self.y = float(value)
        elif idx == 2:
            self.z = float(value)
        elif idx == 3:
            self.w = float(value)
        else:
            raise IndexError("Vec4 index out of range")
