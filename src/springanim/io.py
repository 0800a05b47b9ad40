# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import csv
import json
import numpy as np

PARAM_KEYS = ("spring", "friction", "position", "velocity", "dt", "duration",
              "settle_epsilon")


class _NumpyEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.float32, np.float64)):
            return float(obj)
        if isinstance(obj, (np.int32, np.int64)):
            return int(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


def save_trajectory(traj, path):
    with open(path, "w") as f:
        json.dump(traj, f, cls=_NumpyEncoder, indent=2)


def load_trajectory(path):
    """Read a trajectory written by save_trajectory; arrays come back as numpy."""
    with open(path, "r") as f:
        traj = json.load(f)
    for key in ("t", "position", "velocity"):
        traj[key] = np.asarray(traj[key], dtype=float)
    return traj


def write_trajectory_csv(traj, path):
    """One row per frame: t, then x (or x0, x1, ...), then v (or v0, v1, ...)."""
    x = traj["position"].reshape(len(traj["t"]), -1)
    v = traj["velocity"].reshape(len(traj["t"]), -1)
    if x.shape[1] == 1:
        header = ["t", "x", "v"]
    else:
        header = (["t"] + [f"x{i}" for i in range(x.shape[1])]
                  + [f"v{i}" for i in range(v.shape[1])])
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for t, xi, vi in zip(traj["t"], x, v):
            writer.writerow([repr(float(t))] + [repr(float(c)) for c in xi]
                            + [repr(float(c)) for c in vi])


def load_params(path):
    """Read a JSON parameter file. Unknown keys are rejected."""
    with open(path, "r") as f:
        params = json.load(f)
    if not isinstance(params, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(params).__name__}")
    unknown = sorted(set(params) - set(PARAM_KEYS))
    if unknown:
        raise ValueError(f"{path}: unknown parameter(s) {unknown}; allowed: {list(PARAM_KEYS)}")
    return params
