# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from springanim.solvers.kernels import spring_rk4_deltas
from springanim.solvers.time_integrators import SpringIntegrator


def test_kernel_matches_generic_integrate():
    """The compiled kernel should agree with the generic stepper on arrays."""
    rng = np.random.default_rng(42)
    x = rng.uniform(-2, 2, 200)
    v = rng.uniform(-20, 20, 200)
    integrator = SpringIntegrator(spring=180.0, friction=12.0)
    dx_ref, dv_ref = integrator.integrate(x, v, 1.0 / 60.0)
    dx, dv = integrator.integrate_array(x, v, 1.0 / 60.0)
    assert np.allclose(dx, dx_ref, rtol=1e-13, atol=1e-15)
    assert np.allclose(dv, dv_ref, rtol=1e-13, atol=1e-13)


def test_kernel_preserves_shape_of_points():
    x = np.array([[1.0, -0.5], [0.0, 0.0], [2.0, 3.0]])
    v = np.zeros_like(x)
    dx, dv = spring_rk4_deltas(x, v, 1.0 / 60.0, 250.0, 28.0)
    assert dx.shape == (3, 2)
    assert dv.shape == (3, 2)
    assert dx[1, 0] == 0.0 and dv[1, 1] == 0.0


def test_kernel_zero_dt():
    x = np.linspace(-1, 1, 11)
    v = np.linspace(5, -5, 11)
    dx, dv = spring_rk4_deltas(x, v, 0.0, 250.0, 28.0)
    assert np.all(dx == 0.0)
    assert np.all(dv == 0.0)


def test_kernel_first_frame_values():
    dx, dv = spring_rk4_deltas(np.array([1.0]), np.array([0.0]), 1.0 / 60.0, 250.0, 28.0)
    assert np.isclose(dx[0], -0.029750192901, rtol=1e-9)
    assert np.isclose(dv[0], -3.291062242798, rtol=1e-9)


def test_kernel_accepts_integer_input():
    dx, dv = spring_rk4_deltas([1, 0], [0, 0], 1.0 / 60.0, 250, 28)
    assert dx.dtype == np.float64
    assert np.isclose(dx[0], -0.029750192901, rtol=1e-9)


def test_kernel_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        spring_rk4_deltas(np.zeros(3), np.zeros(4), 1.0 / 60.0, 250.0, 28.0)
