"""Vectors, quaternions and local/global transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union


@dataclass
class Vec3:
    """A 3D vector; 2D users keep z at 0."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length > 0.0:
            return Vec3(self.x / length, self.y / length, self.z / length)
        return Vec3(self.x, self.y, self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        return self.__mul__(other)


@dataclass
class Quat:
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quat:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_euler(cls, roll: float, pitch: float, yaw: float) -> Quat:
        """Rotation from roll (x), pitch (y) and yaw (z) angles in radians."""
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        return cls(
            x=sr * cp * cy - cr * sp * sy,
            y=cr * sp * cy + sr * cp * sy,
            z=cr * cp * sy - sr * sp * cy,
            w=cr * cp * cy + sr * sp * sy,
        )

    def inverse(self) -> Quat:
        """Conjugate, which is the inverse of a unit quaternion."""
        return Quat(-self.x, -self.y, -self.z, self.w)

    def multiply(self, other: Quat) -> Quat:
        """Hamilton product self * other."""
        return Quat(
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def rotate_vector(self, v: Vec3) -> Vec3:
        result = self.multiply(Quat(v.x, v.y, v.z, 0.0)).multiply(self.inverse())
        return Vec3(result.x, result.y, result.z)


@dataclass
class LocalTransform:
    """Transform relative to a parent."""

    position: Vec3 = field(default_factory=Vec3.zero)
    rotation: Quat = field(default_factory=Quat.identity)
    scale: Vec3 = field(default_factory=Vec3.one)

    @classmethod
    def identity(cls) -> LocalTransform:
        return cls()

    @classmethod
    def with_position(cls, position: Vec3) -> LocalTransform:
        return cls(position=position)

    @classmethod
    def with_rotation(cls, rotation: Quat) -> LocalTransform:
        return cls(rotation=rotation)

    @classmethod
    def with_scale(cls, scale: Vec3) -> LocalTransform:
        return cls(scale=scale)


@dataclass
class GlobalTransform:
    """Transform in world space."""

    position: Vec3 = field(default_factory=Vec3.zero)
    rotation: Quat = field(default_factory=Quat.identity)
    scale: Vec3 = field(default_factory=Vec3.one)

    @classmethod
    def identity(cls) -> GlobalTransform:
        return cls()

    @classmethod
    def from_local(cls, parent: GlobalTransform, child: LocalTransform) -> GlobalTransform:
        """Combine a parent's global transform with a child's local one."""
        rotated = parent.rotation.rotate_vector(child.position * parent.scale)
        return cls(
            position=parent.position + rotated,
            rotation=parent.rotation.multiply(child.rotation),
            scale=parent.scale * child.scale,
        )

    def to_local(self, parent: GlobalTransform) -> LocalTransform:
        """Express this transform relative to parent."""
        inv_rot = parent.rotation.inverse()
        inv_scale = Vec3(1.0 / parent.scale.x, 1.0 / parent.scale.y, 1.0 / parent.scale.z)
        return LocalTransform(
            position=inv_rot.rotate_vector(self.position - parent.position) * inv_scale,
            rotation=inv_rot.multiply(self.rotation),
            scale=self.scale * inv_scale,
        )