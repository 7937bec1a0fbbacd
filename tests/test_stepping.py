import math

import numpy as np
import pytest

from robokin.integrators import rk1, rk2, rk3, rk4
from robokin.stepping import integrate

CV_MATRIX = np.array([[0.0, 1.0], [0.0, 0.0]])
CA_MATRIX = np.array([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [0.0, 0.0, 0.0]])


def _cos(_x, t):
    return np.array([math.cos(t)])


def _sin(_x, t):
    return np.array([math.sin(t)])


def _cv(x, _t):
    return CV_MATRIX @ x


def _ca(x, _t):
    return CA_MATRIX @ x


def _assert_within(result, expected, max_error):
    total_error = np.abs(np.asarray(expected) - result)
    assert result.shape == np.asarray(expected).shape
    assert np.all(total_error < np.abs(np.asarray(max_error)))


@pytest.mark.parametrize(
    "integrator, max_error",
    [(rk1, 2e-2), (rk2, 1e-2), (rk3, 1e-2), (rk4, 1e-2)],
)
def test_cos(integrator, max_error):
    start, end, step = 0.0, math.pi, 0.01
    result = integrate(integrator, _cos, np.zeros(1), start, end, step)
    expected = [math.sin(end) - math.sin(start)]
    _assert_within(result, expected, [max_error])


@pytest.mark.parametrize(
    "integrator, max_error",
    [(rk1, 1e-4), (rk2, 1e-4), (rk3, 1e-5), (rk4, 1e-5)],
)
def test_sin(integrator, max_error):
    start, end, step = 0.0, math.pi, 0.01
    result = integrate(integrator, _sin, np.zeros(1), start, end, step)
    expected = [-math.cos(end) - -math.cos(start)]
    _assert_within(result, expected, [max_error])


@pytest.mark.parametrize("integrator", [rk1, rk2, rk3, rk4])
def test_constant_velocity(integrator):
    x0, vel0 = 0.0, 2.0
    start, end, step = 0.0, 10.0, 0.01
    total_time = end - start
    result = integrate(integrator, _cv, [x0, vel0], start, end, step)
    expected = [x0 + vel0 * total_time, vel0]
    _assert_within(result, expected, [1e-12, 1e-12])


@pytest.mark.parametrize(
    "integrator, max_error",
    [
        (rk1, [1e-1, 1e-12, 1e-12]),
        (rk2, [1e-11, 1e-12, 1e-12]),
        (rk3, [1e-11, 1e-12, 1e-12]),
        (rk4, [1e-11, 1e-12, 1e-12]),
    ],
)
def test_constant_acceleration(integrator, max_error):
    x0, vel0, accel0 = 0.0, 1.0, 1.0
    start, end, step = 0.0, 10.0, 0.01
    total_time = end - start
    result = integrate(integrator, _ca, [x0, vel0, accel0], start, end, step)
    expected = [
        x0 + vel0 * total_time + 0.5 * accel0 * total_time * total_time,
        vel0 + accel0 * total_time,
        accel0,
    ]
    _assert_within(result, expected, max_error)


def test_no_full_step_returns_initial_state():
    x0 = np.array([1.5, -2.0])
    result = integrate(rk4, _cv, x0, 0.0, 0.5, 1.0)
    np.testing.assert_array_equal(result, x0)
    result[0] = 99.0
    assert x0[0] == 1.5


def test_initial_state_is_not_modified():
    x0 = np.array([0.0, 2.0])
    integrate(rk1, _cv, x0, 0.0, 1.0, 0.1)
    np.testing.assert_array_equal(x0, [0.0, 2.0])


def test_counts_whole_steps_only():
    calls = []

    def counting(x, t):
        calls.append(t)
        return np.ones_like(x)

    result = integrate(rk1, counting, [0.0], 0.0, 1.0, 0.25)
    assert len(calls) == 4
    assert calls[0] == 0.0
    assert result[0] == pytest.approx(1.0)


@pytest.mark.parametrize("step", [0.0, -0.1])
def test_non_positive_step_raises(step):
    with pytest.raises(ValueError):
        integrate(rk1, _cos, [0.0], 0.0, 1.0, step)