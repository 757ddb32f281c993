"""Headless spin simulation CLI.

Usage:
    python -m spinwheel.cli.simulate --velocity 1200 --sectors 8
    python -m spinwheel.cli.simulate --hold 1.5 --counter-clockwise

Outputs JSON with the frame count, final rotation and landing sector to stdout.
"""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate one spin of the decision wheel")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--velocity", type=float, default=None, help="Release velocity (deg/s)")
    source.add_argument("--hold", type=float, default=None, help="Press-and-hold duration (s)")
    parser.add_argument(
        "--counter-clockwise", action="store_true", help="Spin counter-clockwise (press mode)"
    )
    parser.add_argument("--sectors", type=int, default=8, help="Number of wheel sectors")
    parser.add_argument("--rotation", type=float, default=0.0, help="Starting rotation (deg)")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARN",
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        help="Log level for stderr records",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a single simulated spin.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid input).
    """
    args = build_parser().parse_args(argv)

    from ..animation.driver import SpinDriver
    from ..core.config import default_config, load_config
    from ..core.logging import get_logger, set_log_level
    from ..physics import press_spin
    from ..physics.wheel_physics import clamp_velocity

    set_log_level(args.log_level)
    logger = get_logger(__name__)

    try:
        config = load_config(args.config) if args.config else default_config()
    except (FileNotFoundError, ValidationError) as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    if args.sectors < 0:
        print(f"error: --sectors must be >= 0, got {args.sectors}", file=sys.stderr)
        return 2

    if args.hold is not None:
        velocity = press_spin.velocity(
            args.hold,
            clockwise=not args.counter_clockwise,
            velocity_per_second=config.press.velocity_per_second,
            max_velocity=config.physics.max_velocity,
        )
    elif args.velocity is not None:
        velocity = args.velocity
    else:
        velocity = config.physics.max_velocity / 2

    initial_velocity = clamp_velocity(velocity, config.physics.max_velocity)
    driver = SpinDriver(args.sectors, config=config, rotation=args.rotation)
    generation = driver.begin_spin(initial_velocity)

    with logger.timer("simulate_spin", sectors=args.sectors):
        landing = driver.run_until_stopped()

    output = {
        "initial_velocity": initial_velocity,
        "generation": generation,
        "frames": driver.frames_elapsed,
        "duration_s": driver.frames_elapsed / config.physics.fps,
        "final_rotation": driver.rotation,
        "landing_sector": landing,
    }
    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
