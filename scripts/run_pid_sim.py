#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _ensure_src_on_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


_ensure_src_on_path()

import numpy as np

from feedctl.config import ClampRange, PIDConfig, PIDGains, build_default_config
from feedctl.control import ControlLoop, PIDController
from feedctl.devices import FirstOrderPlant

LOG = logging.getLogger("run_pid_sim")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a PID controller against a simulated first-order plant.",
    )
    parser.add_argument("--setpoint", type=float, default=1.0, help="Target plant output.")
    parser.add_argument("--dt", type=float, default=None, help="Control period in seconds.")
    parser.add_argument("--kp", type=float, default=None, help="Proportional gain.")
    parser.add_argument("--ki", type=float, default=None, help="Integral gain.")
    parser.add_argument("--kd", type=float, default=None, help="Derivative gain.")
    parser.add_argument("--tune-mode", choices=["P", "PI", "PID"], default=None, help="Derive gains with Ziegler-Nichols.")
    parser.add_argument("--ku", type=float, default=None, help="Ultimate gain for tuning.")
    parser.add_argument("--tu", type=float, default=None, help="Oscillation period for tuning (s).")
    parser.add_argument("--plant-gain", type=float, default=1.0, help="Static gain of the simulated plant.")
    parser.add_argument("--plant-tau", type=float, default=0.5, help="Time constant of the simulated plant (s).")
    parser.add_argument("--steps", type=int, default=5000, help="Number of control ticks.")
    parser.add_argument("--rate-hz", type=float, default=None, help="Pace ticks in wall-clock time.")
    parser.add_argument("--o-min", type=float, default=None, help="Lower output clamp.")
    parser.add_argument("--o-max", type=float, default=None, help="Upper output clamp.")
    parser.add_argument("--log-level", default="INFO", help="Python logging level (DEBUG, INFO, ...).")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> PIDConfig:
    defaults = build_default_config(setpoint=args.setpoint)
    gains = defaults.gains
    if args.tune_mode is not None:
        if args.ku is None or args.tu is None:
            raise SystemExit("--tune-mode requires --ku and --tu")
        gains = PIDGains.from_tuning(PIDController.tune(args.tune_mode, args.ku, args.tu))
    gains = PIDGains(
        kp=gains.kp if args.kp is None else args.kp,
        ki=gains.ki if args.ki is None else args.ki,
        kd=gains.kd if args.kd is None else args.kd,
    )

    o_range = None
    if args.o_min is not None or args.o_max is not None:
        lo = -np.inf if args.o_min is None else args.o_min
        hi = np.inf if args.o_max is None else args.o_max
        o_range = ClampRange(lo, hi)

    return PIDConfig(
        setpoint=args.setpoint,
        dt=defaults.dt if args.dt is None else args.dt,
        gains=gains,
        o_range=o_range,
    )


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = build_config(args)
    controller = PIDController.from_config(config)
    plant = FirstOrderPlant(gain=args.plant_gain, tau=args.plant_tau, dt=config.dt)
    LOG.info("Controller: %s", controller)
    LOG.info("Plant: %s", plant)

    loop = ControlLoop(controller, plant)
    trace = loop.run(args.steps, rate_hz=args.rate_hz)

    errors = config.setpoint - trace[:, 1]
    print(f"ticks={trace.shape[0]} final_measure={trace[-1, 1]:.6f} final_output={trace[-1, 2]:.6f}")
    print(f"max_abs_error={np.max(np.abs(errors)):.6f} final_abs_error={abs(errors[-1]):.6f}")


if __name__ == "__main__":
    main()
