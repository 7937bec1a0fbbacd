"""Value bounding and simple planar shape helpers."""

from __future__ import annotations

from typing import TypeVar

from robokin.angles import AngleUnits
from robokin.transforms import FrameTransform3

__all__ = [
    "bound_value",
    "bound_polar_value",
    "calculate_rectangle_points",
    "calculate_line_endpoints",
]

_T = TypeVar("_T")

Point2 = tuple[float, float]


def bound_value(value: _T, lower_bound: _T, upper_bound: _T) -> _T:
    """Clamp ``value`` to the closed interval [lower_bound, upper_bound].

    Raises:
        ValueError: if ``lower_bound`` is greater than ``upper_bound``.
    """
    if not lower_bound <= upper_bound:
        raise ValueError(
            f"lower bound ({lower_bound!r}) must be lower than or equal "
            f"upper bound ({upper_bound!r})"
        )
    if value < lower_bound:
        return lower_bound
    if value > upper_bound:
        return upper_bound
    return value


def bound_polar_value(angle: _T, lower_bound: _T, upper_bound: _T) -> _T:
    """Wrap ``angle`` by whole periods into [lower_bound, upper_bound).

    Raises:
        ValueError: if ``lower_bound`` is not lower than ``upper_bound``.
    """
    if not lower_bound < upper_bound:
        raise ValueError(
            f"lower bound ({lower_bound!r}) must be lower than upper bound ({upper_bound!r})"
        )
    if lower_bound <= angle < upper_bound:
        return angle
    period = upper_bound - lower_bound
    wrapped = lower_bound + (angle - lower_bound) % period
    # Rounding can land exactly on the open upper end.
    while wrapped >= upper_bound:
        wrapped -= period
    while wrapped < lower_bound:
        wrapped += period
    return wrapped


def calculate_rectangle_points(
    start_point: Point2,
    length_front: float,
    length_rear: float,
    width_left: float,
    width_right: float,
    heading_angle: float,
    angle_units: AngleUnits | None,
) -> list[Point2]:
    """Corners of a rectangle around ``start_point`` facing ``heading_angle``.

    Returns front left, front right, rear right, rear left.
    """
    tf = FrameTransform3(
        [start_point[0], start_point[1], 0.0, 0.0, 0.0, heading_angle], angle_units
    )
    body_corners = [
        (length_front, width_left),
        (length_front, -width_right),
        (-length_rear, -width_right),
        (-length_rear, width_left),
    ]
    corners = []
    for x, y in body_corners:
        point = tf.point_b_to_i([x, y, 0.0])
        corners.append((float(point[0]), float(point[1])))
    return corners


def calculate_line_endpoints(
    start_point: Point2,
    length: float,
    heading_angle: float,
    angle_units: AngleUnits | None,
) -> list[Point2]:
    """Start and end of a line of ``length`` from ``start_point`` along ``heading_angle``."""
    tf = FrameTransform3(
        [start_point[0], start_point[1], 0.0, 0.0, 0.0, heading_angle], angle_units
    )
    end = tf.point_b_to_i([length, 0.0, 0.0])
    return [
        (float(start_point[0]), float(start_point[1])),
        (float(end[0]), float(end[1])),
    ]