import math

import numpy as np
import pytest

from robokin.rigid import Isometry, UnitQuaternion

HALF_PI = math.pi / 2


def rotation_90_90_90():
    return UnitQuaternion.from_euler_angles(HALF_PI, HALF_PI, HALF_PI)


def test_zero_euler_angles_give_identity():
    q = UnitQuaternion.from_euler_angles(0.0, 0.0, 0.0)
    assert (q.w, q.x, q.y, q.z) == pytest.approx((1.0, 0.0, 0.0, 0.0))


def test_rotate_point():
    result = rotation_90_90_90().rotate([1.0, 2.0, 3.0])
    np.testing.assert_allclose(result, [3.0, 2.0, -1.0], atol=1e-12)


def test_inverse_rotate_point():
    result = rotation_90_90_90().inverse().rotate([1.0, 2.0, 3.0])
    np.testing.assert_allclose(result, [-3.0, 2.0, 1.0], atol=1e-12)


def test_rotate_angle_vector():
    q = rotation_90_90_90()
    np.testing.assert_allclose(q.rotate([90.0, 0.0, 90.0]), [90.0, 0.0, -90.0], atol=1e-12)
    np.testing.assert_allclose(
        q.inverse().rotate([90.0, 0.0, 90.0]), [-90.0, 0.0, 90.0], atol=1e-12
    )


def test_rotation_round_trip():
    q = UnitQuaternion.from_euler_angles(0.3, -1.1, 2.5)
    v = np.array([0.5, -4.0, 7.25])
    np.testing.assert_allclose(q.inverse().rotate(q.rotate(v)), v, atol=1e-12)


def test_rotation_preserves_length():
    q = UnitQuaternion.from_euler_angles(1.0, 2.0, 3.0)
    v = np.array([1.0, 2.0, 3.0])
    assert np.linalg.norm(q.rotate(v)) == pytest.approx(np.linalg.norm(v))


def test_quaternion_is_normalised():
    q = UnitQuaternion(2.0, 0.0, 0.0, 0.0)
    assert q.w == pytest.approx(1.0)


def test_zero_quaternion_rejected():
    with pytest.raises(ValueError):
        UnitQuaternion(0.0, 0.0, 0.0, 0.0)


def test_rotate_rejects_wrong_shape():
    with pytest.raises(ValueError):
        UnitQuaternion().rotate([1.0, 2.0])


def test_isometry_translation_only():
    iso = Isometry(translation=[1.0, 2.0, 3.0])
    np.testing.assert_allclose(iso.transform_point([1.0, 2.0, 3.0]), [2.0, 4.0, 6.0])
    np.testing.assert_allclose(
        iso.inverse().transform_point([1.0, 2.0, 3.0]), [0.0, 0.0, 0.0], atol=1e-12
    )


def test_isometry_combined():
    iso = Isometry(translation=[1.0, 2.0, 3.0], rotation=rotation_90_90_90())
    point = np.array([1.0, 2.0, 3.0])
    moved = iso.transform_point(point)
    np.testing.assert_allclose(moved, [4.0, 4.0, 2.0], atol=1e-12)
    np.testing.assert_allclose(iso.inverse().transform_point(point), [0.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(iso.inverse().transform_point(moved), point, atol=1e-12)


def test_isometry_rejects_bad_translation():
    with pytest.raises(ValueError):
        Isometry(translation=[1.0, 2.0])