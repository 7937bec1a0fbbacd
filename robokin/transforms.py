"""Frame transforms between a body frame and an inertial frame."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from robokin.angles import AngleUnits, deg_to_rad
from robokin.rigid import Isometry, UnitQuaternion

__all__ = ["FrameTransform3"]


class FrameTransform3:
    """Rigid transform given by body offsets (x, y, z, roll, pitch, yaw).

    The offsets place the body frame in the inertial frame. Angles are in
    degrees unless ``unit`` is ``AngleUnits.RADIAN``. The same unit is
    assumed for angular rates passed to the linear velocity and
    acceleration transforms.
    """

    def __init__(self, offsets: ArrayLike, unit: AngleUnits | None = None) -> None:
        values = np.array(offsets, dtype=float)
        if values.shape != (6,):
            raise ValueError(f"expected 6 offsets, got shape {values.shape}")

        roll, pitch, yaw = values[3:]
        if unit is not AngleUnits.RADIAN:
            roll, pitch, yaw = deg_to_rad(roll), deg_to_rad(pitch), deg_to_rad(yaw)

        rotation = UnitQuaternion.from_euler_angles(float(roll), float(pitch), float(yaw))
        self.b_to_i_iso = Isometry(translation=values[:3], rotation=rotation)
        self.i_to_b_iso = self.b_to_i_iso.inverse()
        self.angle_unit = unit if unit is not None else AngleUnits.DEGREE

    @property
    def _conversion_factor(self) -> float:
        return 1.0 if self.angle_unit is AngleUnits.RADIAN else deg_to_rad(1.0)

    def angle_b_to_i(self, angle_body: ArrayLike) -> NDArray[np.float64]:
        """Rotate body-frame angles into the inertial frame."""
        return self.b_to_i_iso.rotation.rotate(angle_body)

    def angle_i_to_b(self, angle_inertial: ArrayLike) -> NDArray[np.float64]:
        """Rotate inertial-frame angles into the body frame."""
        return self.i_to_b_iso.rotation.rotate(angle_inertial)

    def angular_velocity_b_to_i(self, angular_velocity_body: ArrayLike) -> NDArray[np.float64]:
        """Rotate a body-frame angular velocity into the inertial frame."""
        return self.b_to_i_iso.rotation.rotate(angular_velocity_body)

    def angular_velocity_i_to_b(
        self, angular_velocity_inertial: ArrayLike
    ) -> NDArray[np.float64]:
        """Rotate an inertial-frame angular velocity into the body frame."""
        return self.i_to_b_iso.rotation.rotate(angular_velocity_inertial)

    def angular_acceleration_b_to_i(
        self, angular_acceleration_body: ArrayLike
    ) -> NDArray[np.float64]:
        """Rotate a body-frame angular acceleration into the inertial frame."""
        return self.b_to_i_iso.rotation.rotate(angular_acceleration_body)

    def angular_acceleration_i_to_b(
        self, angular_acceleration_inertial: ArrayLike
    ) -> NDArray[np.float64]:
        """Rotate an inertial-frame angular acceleration into the body frame."""
        return self.i_to_b_iso.rotation.rotate(angular_acceleration_inertial)

    def point_b_to_i(self, point: ArrayLike) -> NDArray[np.float64]:
        """Map a body-frame point into the inertial frame."""
        return self.b_to_i_iso.transform_point(point)

    def point_i_to_b(self, point: ArrayLike) -> NDArray[np.float64]:
        """Map an inertial-frame point into the body frame."""
        return self.i_to_b_iso.transform_point(point)

    def linear_velocity_b_to_i(
        self, linear_velocity_body: ArrayLike, angular_velocity_body: ArrayLike
    ) -> NDArray[np.float64]:
        """Transform a body-frame linear velocity into the inertial frame."""
        iso = self.b_to_i_iso
        omega = self._conversion_factor * self.angular_velocity_b_to_i(angular_velocity_body)
        return iso.rotation.rotate(linear_velocity_body) + np.cross(omega, iso.translation)

    def linear_velocity_i_to_b(
        self, linear_velocity_inertial: ArrayLike, angular_velocity_inertial: ArrayLike
    ) -> NDArray[np.float64]:
        """Transform an inertial-frame linear velocity into the body frame."""
        iso = self.i_to_b_iso
        omega = self._conversion_factor * self.angular_velocity_i_to_b(
            angular_velocity_inertial
        )
        return iso.rotation.rotate(linear_velocity_inertial) + np.cross(omega, iso.translation)

    def linear_acceleration_b_to_i(
        self,
        linear_acceleration_body: ArrayLike,
        angular_acceleration_body: ArrayLike,
        angular_velocity_body: ArrayLike,
    ) -> NDArray[np.float64]:
        """Transform a body-frame linear acceleration into the inertial frame."""
        iso = self.b_to_i_iso
        factor = self._conversion_factor
        alpha = factor * self.angular_acceleration_b_to_i(angular_acceleration_body)
        omega = factor * self.angular_velocity_b_to_i(angular_velocity_body)
        lever = iso.translation
        return (
            iso.rotation.rotate(linear_acceleration_body)
            + np.cross(alpha, lever)
            + np.cross(omega, np.cross(omega, lever))
        )

    def linear_acceleration_i_to_b(
        self,
        linear_acceleration_inertial: ArrayLike,
        angular_acceleration_inertial: ArrayLike,
        angular_velocity_inertial: ArrayLike,
    ) -> NDArray[np.float64]:
        """Transform an inertial-frame linear acceleration into the body frame."""
        iso = self.i_to_b_iso
        factor = self._conversion_factor
        alpha = factor * self.angular_acceleration_i_to_b(angular_acceleration_inertial)
        omega = factor * self.angular_velocity_i_to_b(angular_velocity_inertial)
        lever = iso.translation
        return (
            iso.rotation.rotate(linear_acceleration_inertial)
            + np.cross(alpha, lever)
            + np.cross(omega, np.cross(omega, lever))
        )