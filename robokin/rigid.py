"""Unit quaternions and rigid-body isometries in three dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = ["UnitQuaternion", "Isometry"]


def _vector3(values: ArrayLike) -> NDArray[np.float64]:
    vector = np.array(values, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-element vector, got shape {vector.shape}")
    return vector


@dataclass(frozen=True)
class UnitQuaternion:
    """A rotation stored as a normalised quaternion w + xi + yj + zk."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        norm = math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)
        if norm == 0.0 or not math.isfinite(norm):
            raise ValueError("a unit quaternion needs a finite, non-zero norm")
        for name in ("w", "x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)) / norm)

    @classmethod
    def from_euler_angles(cls, roll: float, pitch: float, yaw: float) -> UnitQuaternion:
        """Build the rotation Rz(yaw) * Ry(pitch) * Rx(roll); angles in radians."""
        sr, cr = math.sin(roll / 2.0), math.cos(roll / 2.0)
        sp, cp = math.sin(pitch / 2.0), math.cos(pitch / 2.0)
        sy, cy = math.sin(yaw / 2.0), math.cos(yaw / 2.0)
        return cls(
            w=cr * cp * cy + sr * sp * sy,
            x=sr * cp * cy - cr * sp * sy,
            y=cr * sp * cy + sr * cp * sy,
            z=cr * cp * sy - sr * sp * cy,
        )

    def rotate(self, vector: ArrayLike) -> NDArray[np.float64]:
        """Rotate a 3-vector by this quaternion."""
        v = _vector3(vector)
        q = np.array([self.x, self.y, self.z])
        t = 2.0 * np.cross(q, v)
        return v + self.w * t + np.cross(q, t)

    def inverse(self) -> UnitQuaternion:
        """Return the opposite rotation."""
        return UnitQuaternion(self.w, -self.x, -self.y, -self.z)


@dataclass(frozen=True, eq=False)
class Isometry:
    """A rotation followed by a translation: p -> R p + t."""

    translation: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    rotation: UnitQuaternion = field(default_factory=UnitQuaternion)

    def __post_init__(self) -> None:
        object.__setattr__(self, "translation", _vector3(self.translation))

    def transform_point(self, point: ArrayLike) -> NDArray[np.float64]:
        """Map a point through the rotation and then the translation."""
        return self.rotation.rotate(point) + self.translation

    def inverse(self) -> Isometry:
        """Return the isometry that undoes this one."""
        inverse_rotation = self.rotation.inverse()
        return Isometry(
            translation=-inverse_rotation.rotate(self.translation),
            rotation=inverse_rotation,
        )