# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from springanim.diagnostics import (
    energy_history,
    observed_order,
    overshoot,
    relative_energy_drift,
    summarize,
)
from springanim.solvers.time_integrators import SpringIntegrator
from springanim.trajectory import simulate


def test_energy_history_shapes():
    scalar = simulate(SpringIntegrator(), 1.0, 0.0, n_steps=20)
    assert energy_history(scalar).shape == (21,)
    assert energy_history(scalar)[0] == 125.0

    points = simulate(SpringIntegrator(), [1.0, 1.0], [0.0, 0.0], n_steps=20)
    assert energy_history(points).shape == (21,)
    assert energy_history(points)[0] == 250.0


def test_undamped_drift_small():
    traj = simulate(SpringIntegrator(friction=0.0), 1.0, 0.0, n_steps=600)
    drift = relative_energy_drift(traj)
    assert drift <= 0.0
    assert abs(drift) < 5e-3


def test_damped_drift_near_minus_one():
    traj = simulate(SpringIntegrator(), 1.0, 0.0, duration=5.0)
    assert np.isclose(relative_energy_drift(traj), -1.0, atol=1e-10)


def test_drift_from_rest_is_zero():
    traj = simulate(SpringIntegrator(), 0.0, 0.0, n_steps=5)
    assert relative_energy_drift(traj) == 0.0


def test_overshoot_by_regime():
    """Underdamped springs overshoot, overdamped ones do not."""
    under = simulate(SpringIntegrator(spring=250.0, friction=10.0), 1.0, 0.0, duration=2.0)
    default = simulate(SpringIntegrator(), 1.0, 0.0, duration=2.0)
    over = simulate(SpringIntegrator(spring=250.0, friction=60.0), 1.0, 0.0, duration=2.0)
    assert overshoot(under) > overshoot(default) > 0.0
    assert overshoot(over) == 0.0


def test_overshoot_matches_closed_form():
    """Peak overshoot of an underdamped spring: exp(-pi zeta / sqrt(1 - zeta^2))."""
    k, c = 250.0, 10.0
    zeta = c / (2.0 * np.sqrt(k))
    expected = np.exp(-np.pi * zeta / np.sqrt(1.0 - zeta**2))
    traj = simulate(SpringIntegrator(spring=k, friction=c), 1.0, 0.0, dt=1e-4, duration=0.5)
    assert np.isclose(overshoot(traj), expected, rtol=1e-3)


def test_overshoot_rejects_bad_trajectories():
    with pytest.raises(ValueError):
        overshoot(simulate(SpringIntegrator(), [1.0, 0.0], [0.0, 0.0], n_steps=3))
    with pytest.raises(ValueError):
        overshoot(simulate(SpringIntegrator(), 0.0, 1.0, n_steps=3))


def test_observed_order_is_four():
    result = observed_order(SpringIntegrator(), 1.0, 0.0, total_time=1.0, n_steps=60)
    assert len(result["errors"]) == 3
    assert result["errors"][0] > result["errors"][1] > result["errors"][2]
    assert 3.5 < result["order"] < 4.5
    assert all(12.0 < r < 24.0 for r in result["ratios"])


def test_observed_order_rejects_coarse_reference():
    with pytest.raises(ValueError):
        observed_order(SpringIntegrator(), 1.0, 0.0, n_steps=60, n_reference=200)


def test_summarize_keys():
    traj = simulate(SpringIntegrator(), 1.0, 0.0, duration=5.0, settle_epsilon=1e-3)
    s = summarize(traj)
    assert s["regime"] == "underdamped"
    assert s["settled"] is True
    assert s["n_frames"] == len(traj["t"])
    assert s["final_displacement"] < 1e-3
    assert "overshoot" in s
