# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for the per-frame hot paths.

Times the generic RK4 step on a float and on a 2-D numpy point, the numba
batch kernel over many animated values, and a full settle-to-rest run.
"""

import time
import cProfile
import pstats
import io
import numpy as np

from springanim.solvers.time_integrators import SpringIntegrator


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_integrate_scalar(n_iter=2000):
    """Benchmark one integrate() call on Python floats."""
    integrator = SpringIntegrator()
    return _time_fn(integrator.integrate, args=(1.0, 0.0, 1.0 / 60.0), n_iter=n_iter)


def bench_integrate_point(n_iter=2000):
    """Benchmark one integrate() call on a 2-D numpy point."""
    integrator = SpringIntegrator()
    x = np.array([1.0, -0.5])
    v = np.zeros(2)
    return _time_fn(integrator.integrate, args=(x, v, 1.0 / 60.0), n_iter=n_iter)


def bench_integrate_array(n_values=1024, n_iter=500):
    """Benchmark the numba kernel over n_values independent springs."""
    integrator = SpringIntegrator()
    x = np.random.randn(n_values)
    v = np.random.randn(n_values)
    return _time_fn(integrator.integrate_array, args=(x, v, 1.0 / 60.0), n_iter=n_iter)


def bench_settle_run():
    """Time a full simulate() until the default spring comes to rest."""
    from springanim.trajectory import simulate
    integrator = SpringIntegrator()
    t0 = time.perf_counter()
    traj = simulate(integrator, 1.0, 0.0, duration=5.0, settle_epsilon=1e-3)
    elapsed = time.perf_counter() - t0
    return {
        "elapsed_s": elapsed,
        "n_frames": int(len(traj["t"])),
        "settled": bool(traj["settled"]),
    }


def profile_settle_run():
    """Run cProfile on a settle-to-rest simulation, return stats as string."""
    from springanim.trajectory import simulate
    integrator = SpringIntegrator()
    pr = cProfile.Profile()
    pr.enable()
    simulate(integrator, np.array([1.0, -0.5]), np.zeros(2), duration=5.0)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(20)
    return s.getvalue()


def run_all_benchmarks(n_values=1024, verbose=True):
    """Run all micro and macro benchmarks. Returns dict of results."""
    results = {}

    benches = [
        ("integrate_scalar", bench_integrate_scalar, {}),
        ("integrate_point", bench_integrate_point, {}),
        ("integrate_array", bench_integrate_array, {"n_values": n_values}),
    ]

    for name, fn, kwargs in benches:
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = fn(**kwargs)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.4f} ms (median, n={r['n_iter']})")

    if verbose:
        print("  settle_run (5 s horizon)...", end="", flush=True)
    r = bench_settle_run()
    results["settle_run"] = r
    if verbose:
        print(f" {r['elapsed_s'] * 1e3:.2f} ms, {r['n_frames']} frames")

    return results


if __name__ == "__main__":
    print("=" * 55)
    print("springanim Benchmarks")
    print("=" * 55)
    print()

    print("cProfile of a 2-D simulate (5 s):")
    print(profile_settle_run())

    print("Micro-benchmarks:")
    run_all_benchmarks()
