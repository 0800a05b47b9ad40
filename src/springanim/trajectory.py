# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/springanim/trajectory.py
import logging
import numpy as np
from springanim.models.spring import DEFAULT_DT

logger = logging.getLogger(__name__)


def is_at_rest(position, velocity, epsilon):
    """True when every component of both position and velocity is within epsilon of 0."""
    return bool(np.all(np.abs(position) < epsilon) and np.all(np.abs(velocity) < epsilon))


def simulate(integrator, position, velocity, dt=DEFAULT_DT, n_steps=None,
             duration=None, settle_epsilon=None):
    """Drive an integrator frame by frame, as an animation loop would.

    Args:
        integrator: a SpringIntegrator (anything with integrate(x, v, dt)).
        position, velocity: initial state, float or array-like.
        dt: frame interval in seconds.
        n_steps: number of frames to advance. Mutually exclusive with duration.
        duration: simulated seconds; converted to ceil(duration / dt) frames.
        settle_epsilon: stop early once the spring is at rest within this
            tolerance. None runs every frame.

    Returns:
        dict with t, position, velocity arrays (frame 0 is the initial
        state), params, settled, settle_time.
    """
    if dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}")
    if (n_steps is None) == (duration is None):
        raise ValueError("exactly one of n_steps or duration is required")
    if duration is not None:
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")
        n_steps = int(np.ceil(duration / dt - 1e-9))
    if n_steps < 0:
        raise ValueError(f"n_steps must be non-negative, got {n_steps}")
    if settle_epsilon is not None and settle_epsilon <= 0:
        raise ValueError(f"settle_epsilon must be positive, got {settle_epsilon}")

    x = np.asarray(position, dtype=float)
    v = np.asarray(velocity, dtype=float)
    if x.shape != v.shape:
        raise ValueError(f"position and velocity shapes differ: {x.shape} vs {v.shape}")

    logger.info(
        "Simulating spring=%s friction=%s dt=%.6g for up to %d frames",
        integrator.spring, integrator.friction, dt, n_steps,
    )

    positions = [x.copy()]
    velocities = [v.copy()]
    settled = settle_epsilon is not None and is_at_rest(x, v, settle_epsilon)
    settle_step = 0 if settled else None

    step = 0
    while step < n_steps and not settled:
        dx, dv = integrator.integrate(x, v, dt)
        x = x + dx
        v = v + dv
        step += 1
        positions.append(x)
        velocities.append(v)
        if settle_epsilon is not None and is_at_rest(x, v, settle_epsilon):
            settled = True
            settle_step = step

    if not np.all(np.isfinite(x)) or not np.all(np.isfinite(v)):
        logger.warning(
            "State is no longer finite after %d frames; dt=%.6g is likely too "
            "large for spring=%s", step, dt, integrator.spring,
        )

    settle_time = settle_step * dt if settle_step is not None else None
    logger.info(
        "Finished after %d frames (%.4g s), settled=%s",
        step, step * dt, settled,
    )

    return {
        "t": np.arange(step + 1) * dt,
        "position": np.array(positions),
        "velocity": np.array(velocities),
        "params": {
            "spring": float(integrator.spring),
            "friction": float(integrator.friction),
            "dt": float(dt),
        },
        "settled": settled,
        "settle_time": settle_time,
    }
