import math

import numpy as np
import pytest

from robokin.angles import AngleUnits, deg_to_rad, rad_to_deg

ANGLES_DEG = [0.0, 45.0, 90.0, 135.0, 180.0]
ANGLES_RAD = [0.0, math.pi / 4, math.pi / 2, 3 * math.pi / 4, math.pi]


@pytest.mark.parametrize(("degrees", "radians"), zip(ANGLES_DEG, ANGLES_RAD))
def test_deg_to_rad(degrees, radians):
    assert deg_to_rad(degrees) == pytest.approx(radians, abs=1e-12)


@pytest.mark.parametrize(("degrees", "radians"), zip(ANGLES_DEG, ANGLES_RAD))
def test_rad_to_deg(degrees, radians):
    assert rad_to_deg(radians) == pytest.approx(degrees, abs=1e-12)


def test_round_trip_negative_angle():
    assert rad_to_deg(deg_to_rad(-270.0)) == pytest.approx(-270.0, abs=1e-12)


def test_conversion_works_on_arrays():
    result = deg_to_rad(np.array(ANGLES_DEG))
    np.testing.assert_allclose(result, ANGLES_RAD, atol=1e-12)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("radian", AngleUnits.RADIAN), ("degree", AngleUnits.DEGREE)],
)
def test_angle_units_lookup_by_value(name, expected):
    assert AngleUnits(name) is expected


def test_angle_units_unknown_value_rejected():
    with pytest.raises(ValueError):
        AngleUnits("gradian")