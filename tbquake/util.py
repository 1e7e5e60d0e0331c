"""Vector, quaternion and rotation helpers for TrenchBroom and Quake maps."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Union

QUAKE_LIGHT_TO_LUX_DIVISOR = 50_000.0


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def convert_zero_to_one(self) -> Vec2:
        """Replace each zero component with one, for use as a divisor."""
        return Vec2(convert_zero_to_one(self.x), convert_zero_to_one(self.y))

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def trenchbroom_to_bevy(self) -> Vec3:
        """Convert from TrenchBroom axes (forward X, right -Y, up Z) to Bevy axes (forward -Z, right X, up Y)."""
        return Vec3(-self.y, self.z, -self.x)

    def bevy_to_trenchbroom(self) -> Vec3:
        """Convert from Bevy axes (forward -Z, right X, up Y) to TrenchBroom axes (forward X, right -Y, up Z)."""
        return Vec3(-self.z, -self.x, self.y)

    def almost_eq(self, other: Vec3, margin: float) -> bool:
        return all(almost_eq(a, b, margin) for a, b in zip(self, other))


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_X = Vec3(-1.0, 0.0, 0.0)
Vec3.NEG_Y = Vec3(0.0, -1.0, 0.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)


class EulerRot(enum.Enum):
    """Euler rotation orders."""

    YXZ = "YXZ"
    """Intrinsic: yaw about Y, then pitch about the new X, then roll about the new Z."""
    YXZEx = "YXZEx"
    """Extrinsic: rotate about world Y, then world X, then world Z."""


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def _from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        s = math.sin(angle * 0.5)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(angle * 0.5))

    @classmethod
    def from_rotation_x(cls, angle: float) -> Quat:
        return cls._from_axis_angle(Vec3.X, angle)

    @classmethod
    def from_rotation_y(cls, angle: float) -> Quat:
        return cls._from_axis_angle(Vec3.Y, angle)

    @classmethod
    def from_rotation_z(cls, angle: float) -> Quat:
        return cls._from_axis_angle(Vec3.Z, angle)

    @classmethod
    def from_euler(cls, order: EulerRot, a: float, b: float, c: float) -> Quat:
        """Build a rotation from three angles in radians, applied in the given order."""
        qa = cls.from_rotation_y(a)
        qb = cls.from_rotation_x(b)
        qc = cls.from_rotation_z(c)
        if order is EulerRot.YXZ:
            return qa * qb * qc
        if order is EulerRot.YXZEx:
            return qc * qb * qa
        raise ValueError(f"unsupported rotation order: {order!r}")

    def rotate(self, vector: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        q = Vec3(self.x, self.y, self.z)
        t = q.cross(vector) * 2.0
        return vector + t * self.w + q.cross(t)

    def __mul__(self, other: Union[Quat, Vec3]):
        if isinstance(other, Vec3):
            return self.rotate(other)
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        return NotImplemented

    def almost_eq(self, other: Quat, margin: float) -> bool:
        return all(almost_eq(a, b, margin) for a, b in zip(self, other))


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Aabb:
    """Axis-aligned bounding box stored as center and half extents."""

    center: Vec3 = Vec3()
    half_extents: Vec3 = Vec3()

    @classmethod
    def from_min_max(cls, minimum: Vec3, maximum: Vec3) -> Aabb:
        return cls((maximum + minimum) * 0.5, (maximum - minimum) * 0.5)

    def min(self) -> Vec3:
        return self.center - self.half_extents

    def max(self) -> Vec3:
        return self.center + self.half_extents


def almost_eq(left, right, margin) -> bool:
    """Whether two numbers, vectors or quaternions differ by less than ``margin`` per component."""
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return abs(right - left) < margin
    if type(left) is not type(right):
        raise TypeError(f"cannot compare {type(left).__name__} with {type(right).__name__}")
    return left.almost_eq(right, margin)


def convert_zero_to_one(value):
    """Return one where ``value`` is zero, for use with division."""
    if isinstance(value, Vec2):
        return value.convert_zero_to_one()
    return 1.0 if value == 0 else value


def angles_to_quat(angles: Vec3) -> Quat:
    """Convert ``angles`` (negative pitch, yaw, negative roll, in degrees) to a rotation in Bevy space."""
    pitch = -math.radians(angles.x)
    yaw = math.radians(angles.y)
    roll = -math.radians(angles.z)
    return Quat.from_euler(EulerRot.YXZ, yaw, pitch, roll)


def mangle_to_quat(mangle: Vec3) -> Quat:
    """Convert ``mangle`` (yaw, pitch, roll, in degrees) to a rotation in Bevy space.

    Only meaningful for light entities; elsewhere ``mangle`` means ``angles``.
    """
    yaw = math.radians(mangle.x)
    pitch = math.radians(mangle.y)
    roll = math.radians(mangle.z)
    return Quat.from_euler(EulerRot.YXZEx, yaw, pitch, roll)


def angle_to_quat(angle: float) -> Quat:
    """Convert ``angle`` (degrees about Y) to a rotation; -1 means up and -2 means down."""
    if angle == -1.0:
        return Quat.from_rotation_x(math.pi / 2)
    if angle == -2.0:
        return Quat.from_rotation_x(-math.pi / 2)
    return Quat.from_rotation_y(math.radians(angle))


def quake_light_to_lux(light: float) -> float:
    """Roughly convert a Quake light value to lux."""
    return light / QUAKE_LIGHT_TO_LUX_DIVISOR