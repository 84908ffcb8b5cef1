"""Vector, quaternion and angle helpers for converting between map and engine space."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

QUAKE_LIGHT_TO_LUX_DIVISOR = 50_000.0


class EulerRot(Enum):
    """Euler rotation orders; plain names are intrinsic, ``Ex`` names are extrinsic."""

    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"
    XYZEx = "XYZEx"
    XZYEx = "XZYEx"
    YXZEx = "YXZEx"
    YZXEx = "YZXEx"
    ZXYEx = "ZXYEx"
    ZYXEx = "ZYXEx"

    @property
    def axes(self) -> str:
        return self.value[:3]

    @property
    def extrinsic(self) -> bool:
        return self.value.endswith("Ex")


@dataclass(frozen=True)
class Vec3:
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def trenchbroom_to_bevy(self) -> Vec3:
        """Convert from TrenchBroom axes (forward X, right -Y, up Z) to engine axes (forward -Z, right X, up Y)."""
        return Vec3(-self.y, self.z, -self.x)

    def bevy_to_trenchbroom(self) -> Vec3:
        """Convert from engine axes (forward -Z, right X, up Y) to TrenchBroom axes (forward X, right -Y, up Z)."""
        return Vec3(-self.z, -self.x, self.y)

    def almost_eq(self, other: Vec3, margin: float) -> bool:
        return (
            almost_eq(self.x, other.x, margin)
            and almost_eq(self.y, other.y, margin)
            and almost_eq(self.z, other.z, margin)
        )

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def _cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}]"


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_X = Vec3(-1.0, 0.0, 0.0)
Vec3.NEG_Y = Vec3(0.0, -1.0, 0.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def from_rotation_x(angle: float) -> Quat:
        half = angle * 0.5
        return Quat(math.sin(half), 0.0, 0.0, math.cos(half))

    @staticmethod
    def from_rotation_y(angle: float) -> Quat:
        half = angle * 0.5
        return Quat(0.0, math.sin(half), 0.0, math.cos(half))

    @staticmethod
    def from_rotation_z(angle: float) -> Quat:
        half = angle * 0.5
        return Quat(0.0, 0.0, math.sin(half), math.cos(half))

    @staticmethod
    def from_euler(order: EulerRot, a: float, b: float, c: float) -> Quat:
        """Build a rotation from three angles in radians applied in the given order."""
        builders = {
            "X": Quat.from_rotation_x,
            "Y": Quat.from_rotation_y,
            "Z": Quat.from_rotation_z,
        }
        first, second, third = (builders[axis] for axis in order.axes)
        if order.extrinsic:
            return third(c) * second(b) * first(a)
        return first(a) * second(b) * third(c)

    def almost_eq(self, other: Quat, margin: float) -> bool:
        return (
            almost_eq(self.x, other.x, margin)
            and almost_eq(self.y, other.y, margin)
            and almost_eq(self.z, other.z, margin)
            and almost_eq(self.w, other.w, margin)
        )

    def __mul__(self, other: Union[Quat, Vec3]) -> Union[Quat, Vec3]:
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Vec3):
            axis = Vec3(self.x, self.y, self.z)
            t = axis._cross(other) * 2.0
            return other + t * self.w + axis._cross(t)
        return NotImplemented

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}, {self.w}]"


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Aabb:
    """Axis aligned bounding box stored as a center and half extents."""

    center: Vec3 = Vec3()
    half_extents: Vec3 = Vec3()

    @staticmethod
    def from_min_max(minimum: Vec3, maximum: Vec3) -> Aabb:
        return Aabb(center=(maximum + minimum) * 0.5, half_extents=(maximum - minimum) * 0.5)

    def min(self) -> Vec3:
        return self.center - self.half_extents

    def max(self) -> Vec3:
        return self.center + self.half_extents


def almost_eq(a, b, margin: float) -> bool:
    """Whether ``a`` and ``b`` differ by less than ``margin`` in every component."""
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return abs(b - a) < margin
    return a.almost_eq(b, margin)


def convert_zero_to_one(value):
    """Replace zero (or zero components) with one, for safe use as a divisor."""
    if isinstance(value, (int, float)):
        return 1.0 if value == 0 else value
    if isinstance(value, Vec3):
        return replace(
            value,
            x=convert_zero_to_one(value.x),
            y=convert_zero_to_one(value.y),
            z=convert_zero_to_one(value.z),
        )
    return type(value)(convert_zero_to_one(component) for component in value)


def angles_to_quat(angles: Vec3) -> Quat:
    """``angles`` is negative pitch, yaw, negative roll in degrees, in engine space."""
    pitch = -math.radians(angles.x)
    yaw = math.radians(angles.y)
    roll = -math.radians(angles.z)
    return Quat.from_euler(EulerRot.YXZ, yaw, pitch, roll)


def mangle_to_quat(mangle: Vec3) -> Quat:
    """``mangle`` is yaw, pitch, roll in degrees, in engine space.

    Only meaningful for light entities; elsewhere "mangle" means the same as "angles".
    """
    yaw = math.radians(mangle.x)
    pitch = math.radians(mangle.y)
    roll = math.radians(mangle.z)
    return Quat.from_euler(EulerRot.YXZEx, yaw, pitch, roll)


def angle_to_quat(angle: float) -> Quat:
    """Rotation around the Y axis in degrees; -1 means up and -2 means down."""
    if angle == -1.0:
        return Quat.from_rotation_x(math.pi / 2)
    if angle == -2.0:
        return Quat.from_rotation_x(-math.pi / 2)
    return Quat.from_rotation_y(math.radians(angle))


def quake_light_to_lux(light: float) -> float:
    """Rough conversion of a Quake light value to lux."""
    return light / QUAKE_LIGHT_TO_LUX_DIVISOR