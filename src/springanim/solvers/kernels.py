# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit


@njit(cache=True)
def _rk4_spring_kernel(x, v, dt, spring, friction):
    """RK4 deltas for n independent scalar springs sharing (spring, friction).

    Args:
        x: positions, float64, length n.
        v: velocities, float64, length n.
        dt: step length.
        spring, friction: spring constants.

    Returns:
        (dx, dv): position and velocity increments, length n.
    """
    n = x.shape[0]
    dx = np.empty(n)
    dv = np.empty(n)
    h = 0.5 * dt
    sixth = dt / 6.0
    for i in range(n):
        p = x[i]
        u = v[i]

        dp1 = u
        dv1 = -spring * p - friction * u

        dp2 = u + h * dv1
        dv2 = -spring * (p + h * dp1) - friction * dp2

        dp3 = u + h * dv2
        dv3 = -spring * (p + h * dp2) - friction * dp3

        dp4 = u + dt * dv3
        dv4 = -spring * (p + dt * dp3) - friction * dp4

        dx[i] = sixth * (dp1 + 2.0 * (dp2 + dp3) + dp4)
        dv[i] = sixth * (dv1 + 2.0 * (dv2 + dv3) + dv4)
    return dx, dv


def spring_rk4_deltas(position, velocity, dt, spring, friction):
    """Element-wise RK4 step over arrays of any matching shape.

    Every element is treated as its own scalar spring, which is exact for
    this model: the acceleration never mixes components.
    """
    x = np.ascontiguousarray(position, dtype=np.float64)
    v = np.ascontiguousarray(velocity, dtype=np.float64)
    if x.shape != v.shape:
        raise ValueError(
            f"position and velocity shapes differ: {x.shape} vs {v.shape}"
        )
    dx, dv = _rk4_spring_kernel(x.ravel(), v.ravel(), float(dt),
                                float(spring), float(friction))
    return dx.reshape(x.shape), dv.reshape(x.shape)
