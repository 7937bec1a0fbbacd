"""Fixed-step integration over an interval with a single-step integrator."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from robokin.integrators import Integrator, Vector, VectorFn

__all__ = ["integrate"]


def integrate(
    integrator: Integrator,
    func: VectorFn,
    x0: ArrayLike,
    start: float,
    end: float,
    step: float,
) -> Vector:
    """Integrate dx/dt = func(x, t) from ``start`` towards ``end``.

    Steps of size ``step`` are taken while the end of the next step does
    not pass ``end``; a final partial step is never taken. The state after
    the last full step is returned. If no full step fits, a copy of ``x0``
    is returned.

    Raises:
        ValueError: if ``step`` is not strictly positive.
    """
    if not step > 0:
        raise ValueError(f"step ({step!r}) must be greater than zero")

    result = np.array(x0, dtype=float)
    t0 = start
    tf = start + step
    while tf <= end:
        result = np.asarray(integrator(func, result, t0, tf), dtype=float)
        t0 = tf
        tf += step
    return result