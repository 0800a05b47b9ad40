#!/usr/bin/env python
"""Plot step responses of the spring for a few friction values.

Usage:
    python scripts/plot_response.py [--spring 250] [--friction 10 28 40] [--out response.pdf]

Draws displacement against time for each friction value and the phase
portrait (x, v) of the default spring, using the same RK4 stepper the
animations use.
"""

import argparse
import os
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

# Allow running without pip install -e .
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from springanim.models.spring import DEFAULT_FRICTION, DEFAULT_SPRING, classify_damping
from springanim.solvers.time_integrators import SpringIntegrator
from springanim.trajectory import simulate

sns.set_theme(style="whitegrid", context="paper", font_scale=1.1)


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--spring", type=float, default=DEFAULT_SPRING)
    parser.add_argument("--friction", nargs="+", type=float,
                        default=[10.0, DEFAULT_FRICTION, 40.0])
    parser.add_argument("--duration", type=float, default=1.5)
    parser.add_argument("--out", type=str, default="response.pdf")
    args = parser.parse_args()

    fig, (ax_x, ax_phase) = plt.subplots(1, 2, figsize=(10, 4))
    palette = sns.color_palette("deep", len(args.friction))

    for color, friction in zip(palette, args.friction):
        integrator = SpringIntegrator(spring=args.spring, friction=friction)
        traj = simulate(integrator, 1.0, 0.0, duration=args.duration)
        label = f"c={friction:g} ({classify_damping(args.spring, friction)})"
        ax_x.plot(traj["t"], traj["position"], color=color, label=label)
        ax_phase.plot(traj["position"], traj["velocity"], color=color)

    ax_x.axhline(0.0, color="k", lw=0.8, ls=":")
    ax_x.set_xlabel("t [s]")
    ax_x.set_ylabel("x")
    ax_x.legend(frameon=False)
    ax_phase.set_xlabel("x")
    ax_phase.set_ylabel("v")
    ax_phase.set_title(f"k={args.spring:g}")

    fig.tight_layout()
    fig.savefig(args.out, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved {args.out}")


if __name__ == "__main__":
    main()
