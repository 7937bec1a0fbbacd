"""Single-step explicit Runge-Kutta integrators for dx/dt = f(x, t).

Each integrator advances a state vector ``x0`` from time ``t0`` to ``tf``
in one step and returns the new state as a NumPy array. State vectors may
be of any length.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray

Vector: TypeAlias = NDArray[np.float64]
VectorFn: TypeAlias = Callable[[Vector, float], ArrayLike]
"""Right-hand side of dx/dt = f(x, t)."""

Integrator: TypeAlias = Callable[[VectorFn, ArrayLike, float, float], Vector]
"""A single-step integrator: (func, x0, t0, tf) -> x(tf)."""

__all__ = ["Vector", "VectorFn", "Integrator", "rk1", "rk2", "rk3", "rk4"]


def _as_state(x: ArrayLike) -> Vector:
    return np.array(x, dtype=float)


def _evaluate(func: VectorFn, x: Vector, t: float) -> Vector:
    return np.asarray(func(x, t), dtype=float)


def rk1(func: VectorFn, x0: ArrayLike, t0: float, tf: float) -> Vector:
    """Advance one step with the 1st-order Runge-Kutta (Euler) method."""
    x = _as_state(x0)
    dt = tf - t0
    return x + dt * _evaluate(func, x, t0)


def rk2(func: VectorFn, x0: ArrayLike, t0: float, tf: float) -> Vector:
    """Advance one step with a 2nd-order Runge-Kutta method."""
    x = _as_state(x0)
    dt = tf - t0
    k1 = _evaluate(func, x, t0)
    k2 = _evaluate(func, x + dt * k1, t0 + dt)
    return x + 0.5 * dt * (k1 + k2)


def rk3(func: VectorFn, x0: ArrayLike, t0: float, tf: float) -> Vector:
    """Advance one step with a 3rd-order Runge-Kutta method."""
    x = _as_state(x0)
    dt = tf - t0
    k1 = _evaluate(func, x, t0)
    k2 = _evaluate(func, x + dt * k1, t0 + dt)
    k3 = _evaluate(func, x + (dt / 4.0) * (k1 + k2), t0 + dt / 2.0)
    return x + (dt / 6.0) * (k1 + k2 + 4.0 * k3)


def rk4(func: VectorFn, x0: ArrayLike, t0: float, tf: float) -> Vector:
    """Advance one step with the classic 4th-order Runge-Kutta method."""
    x = _as_state(x0)
    dt = tf - t0
    half = dt / 2.0
    k1 = _evaluate(func, x, t0)
    k2 = _evaluate(func, x + half * k1, t0 + half)
    k3 = _evaluate(func, x + half * k2, t0 + half)
    k4 = _evaluate(func, x + dt * k3, tf)
    return x + (dt / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)