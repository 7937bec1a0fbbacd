"""Angle units and conversions between radians and degrees."""

from __future__ import annotations

import enum
import math
from typing import TypeVar

__all__ = ["AngleUnits", "rad_to_deg", "deg_to_rad"]

_Number = TypeVar("_Number")


class AngleUnits(enum.Enum):
    """Units an angle is expressed in."""

    RADIAN = "radian"
    DEGREE = "degree"


def rad_to_deg(angle: _Number) -> _Number:
    """Convert an angle (or array of angles) from radians to degrees."""
    return (180.0 / math.pi) * angle


def deg_to_rad(angle: _Number) -> _Number:
    """Convert an angle (or array of angles) from degrees to radians."""
    return (math.pi / 180.0) * angle