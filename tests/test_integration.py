# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_integration.py
import numpy as np
from springanim.diagnostics import summarize
from springanim.io import load_trajectory, save_trajectory
from springanim.solvers.time_integrators import SpringIntegrator
from springanim.trajectory import simulate


def test_end_to_end_settle_run():
    """Full pipeline: integrator -> driver -> diagnostics -> summary dict."""
    integrator = SpringIntegrator()
    traj = simulate(integrator, 1.0, 0.0, duration=5.0, settle_epsilon=1e-4)
    summary = summarize(traj)

    assert summary["settled"] is True
    assert summary["regime"] == "underdamped"
    assert isinstance(summary["energy_drift"], float)
    assert summary["overshoot"] > 0.0


def test_end_to_end_save_load(tmp_path):
    """Full pipeline through save/load."""
    traj = simulate(SpringIntegrator(friction=0.0), [1.0, 0.0], [0.0, 5.0], n_steps=120)
    path = str(tmp_path / "traj.json")
    save_trajectory(traj, path)
    loaded = load_trajectory(path)
    assert np.array_equal(loaded["velocity"], traj["velocity"])
    assert summarize(loaded)["energy_drift"] == summarize(traj)["energy_drift"]


def test_batched_frames_match_generic_driver():
    """Many springs stepped with the compiled kernel follow the generic driver."""
    integrator = SpringIntegrator(spring=300.0, friction=20.0)
    x0 = np.array([1.0, -0.3, 0.0, 2.5])
    v0 = np.array([0.0, 4.0, -1.0, 0.0])
    traj = simulate(integrator, x0, v0, n_steps=90)

    x, v = x0.copy(), v0.copy()
    for _ in range(90):
        dx, dv = integrator.integrate_array(x, v, 1.0 / 60.0)
        x += dx
        v += dv
    assert np.allclose(x, traj["position"][-1], rtol=1e-10, atol=1e-14)
    assert np.allclose(v, traj["velocity"][-1], rtol=1e-10, atol=1e-13)
