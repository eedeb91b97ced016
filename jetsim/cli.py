"""
Command-line report: parse an NC file and print its cut-time estimate.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from jetsim.core import parse_file, toolpath_to_points
from jetsim.estimation import (
    ConfigError,
    EstimatorConfig,
    InvalidCutTimeParameters,
    estimate_program_time,
    render_report,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jetsim",
        description="Parse a waterjet NC program and estimate its cut time.",
    )
    parser.add_argument("path", help="NC program file")
    parser.add_argument("--config", help="Estimator config JSON")
    parser.add_argument("--pierce-time", type=float, help="Minutes per pierce")
    parser.add_argument("--speed", type=float, help="Cutting speed override (mm/min)")
    parser.add_argument("--reference", type=float, help="Reference cut time to compare against (min)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = EstimatorConfig.from_json(args.config) if args.config else EstimatorConfig()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        program = parse_file(args.path)
    except OSError as e:
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    try:
        estimate = estimate_program_time(
            program,
            config,
            pierce_time=args.pierce_time,
            cutting_speed=args.speed,
        )
    except InvalidCutTimeParameters as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    polyline = toolpath_to_points(program.toolpath, num_samples=config.arc_samples)
    print(render_report(
        program,
        estimate,
        reference_minutes=args.reference,
        replay_points=len(polyline),
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
