# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/springanim/diagnostics.py
import numpy as np
from springanim.models.spring import classify_damping, damping_ratio, mechanical_energy


def energy_history(traj):
    """Mechanical energy per frame, shape (n_frames,)."""
    x = traj["position"]
    axis = -1 if x.ndim > 1 else None
    return mechanical_energy(x, traj["velocity"], traj["params"]["spring"], axis=axis)


def relative_energy_drift(traj):
    """(E_final - E_0) / E_0. Zero initial energy gives 0.0."""
    e = energy_history(traj)
    if e[0] == 0.0:
        return 0.0
    return float((e[-1] - e[0]) / e[0])


def overshoot(traj):
    """Largest excursion past rest, relative to the initial displacement.

    Only defined for scalar trajectories that start displaced from rest.
    A spring that never crosses zero returns 0.0.
    """
    x = traj["position"]
    if x.ndim != 1:
        raise ValueError(f"overshoot needs a scalar trajectory, got shape {x.shape}")
    x0 = x[0]
    if x0 == 0.0:
        raise ValueError("overshoot is undefined for a trajectory starting at rest")
    past = -x / x0
    return float(max(past.max(), 0.0))


def _integrate_to(integrator, position, velocity, total_time, n):
    dt = total_time / n
    x, v = position, velocity
    for _ in range(n):
        dx, dv = integrator.integrate(x, v, dt)
        x = x + dx
        v = v + dv
    return x


def observed_order(integrator, position, velocity, total_time=1.0, n_steps=60,
                   n_reference=20000):
    """Estimate the convergence order of the stepper on one scalar problem.

    Integrates to `total_time` with n, 2n and 4n steps and compares each
    final position with a run of `n_reference` tiny steps.

    Returns:
        dict with errors (list of 3 floats), ratios (err_n/err_2n,
        err_2n/err_4n) and order (log2 of the first ratio).
    """
    if n_steps < 1 or n_reference <= 4 * n_steps:
        raise ValueError(
            f"need 1 <= n_steps and n_reference > 4*n_steps, got "
            f"n_steps={n_steps}, n_reference={n_reference}"
        )
    ref = _integrate_to(integrator, position, velocity, total_time, n_reference)
    errors = [
        float(abs(_integrate_to(integrator, position, velocity, total_time, n) - ref))
        for n in (n_steps, 2 * n_steps, 4 * n_steps)
    ]
    ratios = [errors[0] / errors[1], errors[1] / errors[2]]
    return {
        "errors": errors,
        "ratios": ratios,
        "order": float(np.log2(ratios[0])),
    }


def summarize(traj):
    """Headline numbers of a trajectory, flat enough for a CSV row."""
    p = traj["params"]
    x = traj["position"]
    v = traj["velocity"]
    summary = {
        "spring": p["spring"],
        "friction": p["friction"],
        "dt": p["dt"],
        "regime": classify_damping(p["spring"], p["friction"]),
        "damping_ratio": damping_ratio(p["spring"], p["friction"]),
        "n_frames": int(len(traj["t"])),
        "final_time": float(traj["t"][-1]),
        "final_displacement": float(np.max(np.abs(x[-1]))),
        "final_speed": float(np.max(np.abs(v[-1]))),
        "energy_drift": relative_energy_drift(traj),
        "settled": bool(traj["settled"]),
        "settle_time": traj["settle_time"],
    }
    if x.ndim == 1 and x[0] != 0.0:
        summary["overshoot"] = overshoot(traj)
    return summary
