# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Closed-form properties of the damped spring x'' + c x' + k x = 0.

Unit mass throughout: k is the `spring` constant, c the `friction`.
"""

import numpy as np

DEFAULT_SPRING = 250.0
DEFAULT_FRICTION = 28.0
DEFAULT_DT = 1.0 / 60.0

# Real-axis stability boundary of classical RK4 (|h*lambda| for lambda < 0).
RK4_STABILITY_RADIUS = 2.785


def _check_spring(spring):
    if spring <= 0:
        raise ValueError(f"spring must be positive, got {spring}")


def natural_frequency(spring):
    """Undamped angular frequency omega_0 = sqrt(k), in rad/s."""
    _check_spring(spring)
    return float(np.sqrt(spring))


def critical_friction(spring):
    """Friction at which the spring stops overshooting: c = 2 sqrt(k)."""
    return 2.0 * natural_frequency(spring)


def damping_ratio(spring, friction):
    """zeta = c / (2 sqrt(k)). Below 1 the spring overshoots its rest position."""
    return friction / critical_friction(spring)


def classify_damping(spring, friction, rtol=1e-9):
    """Label the regime of (spring, friction).

    Returns one of "undamped", "underdamped", "critical", "overdamped".
    """
    zeta = damping_ratio(spring, friction)
    if zeta == 0.0:
        return "undamped"
    if np.isclose(zeta, 1.0, rtol=rtol, atol=0.0):
        return "critical"
    return "underdamped" if zeta < 1.0 else "overdamped"


def stable_dt(spring, friction):
    """Largest step for which explicit RK4 stays bounded on this spring.

    Advisory only: the integrator itself accepts any dt.

    The eigenvalues of the first-order system are the roots of
    lambda^2 + c lambda + k = 0. For an oscillating spring |lambda| = sqrt(k);
    for an overdamped one the stiff root dominates.
    """
    _check_spring(spring)
    disc = friction**2 - 4.0 * spring
    if disc <= 0:
        lam = np.sqrt(spring)
    else:
        lam = 0.5 * (abs(friction) + np.sqrt(disc))
    return float(RK4_STABILITY_RADIUS / lam)


def mechanical_energy(position, velocity, spring, axis=None):
    """E = 0.5 |v|^2 + 0.5 k |x|^2 for unit mass.

    Evaluated element-wise on scalars or arrays. Pass `axis` to sum the
    components of multi-dimensional values, e.g. axis=-1 for a trajectory
    of 2-D points shaped (n_frames, 2).
    """
    x = np.asarray(position, dtype=float)
    v = np.asarray(velocity, dtype=float)
    e = 0.5 * v**2 + 0.5 * spring * x**2
    if axis is not None:
        e = e.sum(axis=axis)
    return e
