"""Rotation quaternion with Euler conversion and vector rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nexuscore.math3d import Matrix4, Vector3

_GIMBAL_EPSILON = 1e-6


@dataclass(frozen=True)
class Quaternion:
    """Immutable quaternion; ``w`` is the scalar part."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def identity() -> Quaternion:
        """Return the identity rotation."""
        return Quaternion()

    def dot(self, other: Quaternion) -> float:
        """Return the four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def normalized(self) -> Quaternion:
        """Return a unit quaternion, or the identity for a zero quaternion."""
        length_sq = self.dot(self)
        if length_sq <= 0.0:
            return Quaternion.identity()
        inv = 1.0 / math.sqrt(length_sq)
        return Quaternion(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def conjugate(self) -> Quaternion:
        """Return the conjugate."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse, or the identity for zero."""
        length_sq = self.dot(self)
        if length_sq <= 0.0:
            return Quaternion.identity()
        c = self.conjugate()
        inv = 1.0 / length_sq
        return Quaternion(c.x * inv, c.y * inv, c.z * inv, c.w * inv)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
        )

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Build a unit rotation of ``angle`` radians about ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(axis.x * s, axis.y * s, axis.z * s, math.cos(half)).normalized()

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float) -> Quaternion:
        """Build a rotation from X, Y and Z angles in radians, composed X*Y*Z."""
        qx = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), pitch)
        qy = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), yaw)
        qz = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), roll)
        return (qx * qy) * qz

    @staticmethod
    def from_euler_vector(euler: Vector3) -> Quaternion:
        """Build a rotation from a vector of (pitch, yaw, roll) radians."""
        return Quaternion.from_euler(euler.x, euler.y, euler.z)

    def to_euler(self) -> Vector3:
        """Return (pitch, yaw, roll) in radians, inverse of :meth:`from_euler`."""
        n = self.normalized()
        xx, yy, zz = n.x * n.x, n.y * n.y, n.z * n.z
        xy, xz, yz = n.x * n.y, n.x * n.z, n.y * n.z
        wx, wy, wz = n.w * n.x, n.w * n.y, n.w * n.z

        m00 = 1.0 - 2.0 * (yy + zz)
        m01 = 2.0 * (xy - wz)
        m02 = 2.0 * (xz + wy)
        m11 = 1.0 - 2.0 * (xx + zz)
        m12 = 2.0 * (yz - wx)
        m21 = 2.0 * (yz + wx)
        m22 = 1.0 - 2.0 * (xx + yy)

        yaw = math.asin(min(max(m02, -1.0), 1.0))
        if abs(math.cos(yaw)) > _GIMBAL_EPSILON:
            pitch = math.atan2(-m12, m22)
            roll = math.atan2(-m01, m00)
        else:
            # Gimbal lock: roll is fixed at zero and pitch absorbs the rest.
            pitch = math.atan2(m21, m11)
            roll = 0.0
        return Vector3(pitch, yaw, roll)

    def rotate(self, vector: Vector3) -> Vector3:
        """Rotate ``vector`` by this rotation."""
        q = self.normalized()
        r = (q * Quaternion(vector.x, vector.y, vector.z, 0.0)) * q.conjugate()
        return Vector3(r.x, r.y, r.z)

    def forward(self) -> Vector3:
        """Return the rotated forward direction (negative Z)."""
        return self.rotate(Vector3(0.0, 0.0, -1.0))

    def right(self) -> Vector3:
        """Return the rotated right direction (positive X)."""
        return self.rotate(Vector3(1.0, 0.0, 0.0))

    def to_matrix(self) -> Matrix4:
        """Return the rotation as a row-vector 4x4 matrix."""
        q = self.normalized()
        xx, yy, zz = q.x * q.x, q.y * q.y, q.z * q.z
        xy, xz, yz = q.x * q.y, q.x * q.z, q.y * q.z
        wx, wy, wz = q.w * q.x, q.w * q.y, q.w * q.z
        return Matrix4(
            (
                (1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0),
                (2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0),
                (2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )