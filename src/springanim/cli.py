# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line interface for offline spring trajectories."""

import argparse
import logging
import os
import sys

from springanim.diagnostics import summarize
from springanim.io import load_params
from springanim.models.spring import DEFAULT_DT, DEFAULT_FRICTION, DEFAULT_SPRING
from springanim.run_utils import configure_logging, print_summary_table, save_run_results
from springanim.solvers.time_integrators import SpringIntegrator
from springanim.trajectory import simulate

DEFAULTS = dict(
    spring=DEFAULT_SPRING,
    friction=DEFAULT_FRICTION,
    position=[1.0],
    velocity=None,
    dt=DEFAULT_DT,
    duration=2.0,
    settle_epsilon=None,
)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="springanim-sim",
        description="Integrate a damped spring with RK4 and save the trajectory.",
    )
    parser.add_argument(
        "--spring", type=float, default=None,
        help=f"Spring stiffness k (default: {DEFAULT_SPRING:g})",
    )
    parser.add_argument(
        "--friction", type=float, default=None,
        help=f"Friction/damping coefficient c (default: {DEFAULT_FRICTION:g})",
    )
    parser.add_argument(
        "--position", nargs="+", type=float, default=None,
        help="Initial displacement; give two values for 2-D motion (default: 1.0)",
    )
    parser.add_argument(
        "--velocity", nargs="+", type=float, default=None,
        help="Initial velocity, same length as --position (default: zeros)",
    )
    parser.add_argument(
        "--dt", type=float, default=None,
        help="Frame interval in seconds (default: 1/60)",
    )
    parser.add_argument(
        "--duration", type=float, default=None,
        help="Simulated seconds (default: 2.0)",
    )
    parser.add_argument(
        "--settle", dest="settle_epsilon", type=float, default=None,
        help="Stop once |x| and |v| are both below this tolerance",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON file with any of the above parameters; flags take precedence",
    )
    parser.add_argument(
        "--outdir", type=str, default="results",
        help="Output directory (default: results/)",
    )
    parser.add_argument(
        "--quiet", action="store_true",
        help="Only log warnings",
    )
    return parser


def resolve_params(args):
    """Merge defaults, the --config file and explicit flags, in that order."""
    params = dict(DEFAULTS)
    if args.config:
        params.update(load_params(args.config))
    for key in DEFAULTS:
        value = getattr(args, key)
        if value is not None:
            params[key] = value

    position = params["position"]
    if not isinstance(position, list):
        position = [position]
    velocity = params["velocity"]
    if velocity is None:
        velocity = [0.0] * len(position)
    elif not isinstance(velocity, list):
        velocity = [velocity]
    if len(velocity) != len(position):
        raise ValueError(
            f"velocity has {len(velocity)} component(s) but position has {len(position)}"
        )
    # A single component is simulated as a plain scalar spring.
    params["position"] = position[0] if len(position) == 1 else position
    params["velocity"] = velocity[0] if len(velocity) == 1 else velocity
    return params


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING if args.quiet else logging.INFO
    existing = list(logging.getLogger("springanim").handlers)
    logger = configure_logging(args.outdir, "springanim-sim", level=level)
    try:
        try:
            params = resolve_params(args)
            integrator = SpringIntegrator(spring=params["spring"],
                                          friction=params["friction"])
            traj = simulate(
                integrator, params["position"], params["velocity"],
                dt=params["dt"], duration=params["duration"],
                settle_epsilon=params["settle_epsilon"],
            )
        except ValueError as exc:
            logger.error("%s", exc)
            return 2

        summary = summarize(traj)
        paths = save_run_results(traj, summary, args.outdir)

        if not args.quiet:
            print_summary_table(summary)
            print(f"\nTrajectory saved to {paths['json']}")
            print(f"Summary: {os.path.join(args.outdir, 'summary.csv')}")
        return 0
    finally:
        # Handlers added for this run only.
        for h in list(logger.handlers):
            if h not in existing:
                h.close()
                logger.removeHandler(h)


if __name__ == "__main__":
    sys.exit(main())
