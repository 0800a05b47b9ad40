# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities for simulation runs: output files, logging, summary tables."""

import csv
import logging
import os

from springanim.io import save_trajectory, write_trajectory_csv


def save_run_results(traj, summary, outdir):
    """Write trajectory.json, trajectory.csv and summary.csv into outdir.

    Returns:
        dict mapping each output kind to its path.
    """
    os.makedirs(outdir, exist_ok=True)
    paths = {
        "json": os.path.join(outdir, "trajectory.json"),
        "csv": os.path.join(outdir, "trajectory.csv"),
        "summary": os.path.join(outdir, "summary.csv"),
    }
    save_trajectory(traj, paths["json"])
    write_trajectory_csv(traj, paths["csv"])

    with open(paths["summary"], "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=summary.keys())
        writer.writeheader()
        writer.writerow(summary)

    return paths


def configure_logging(outdir, run_name, level=logging.INFO):
    """Set up file + console logging on the 'springanim' logger.

    Args:
        outdir: directory for the log file.
        run_name: used in the log filename.
        level: threshold for both handlers.

    Returns:
        the configured logger.
    """
    os.makedirs(outdir, exist_ok=True)
    logger = logging.getLogger("springanim")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    # File handler
    log_path = os.path.join(outdir, f"{run_name}.log")
    fh = logging.FileHandler(log_path)
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_summary_table(summary):
    """Print a formatted one-run summary to stdout."""
    settle = summary["settle_time"]
    settle_str = f"{settle:.3f}" if settle is not None else "-"
    header = (f"{'spring':>8} {'friction':>8} {'zeta':>6} {'regime':>12} "
              f"{'frames':>7} {'|x|':>10} {'|v|':>10} {'settle_s':>9}")
    print(header)
    print("-" * len(header))
    print(
        f"{summary['spring']:>8.2f} {summary['friction']:>8.2f} "
        f"{summary['damping_ratio']:>6.3f} {summary['regime']:>12} "
        f"{summary['n_frames']:>7d} {summary['final_displacement']:>10.3e} "
        f"{summary['final_speed']:>10.3e} {settle_str:>9}"
    )
