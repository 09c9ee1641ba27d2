from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from feedctl.control.updatable import Updatable
from feedctl.errors import InvalidConfigurationError

LOG = logging.getLogger(__name__)


@dataclass
class LoopSample:
    """Snapshot of one closed-loop tick."""

    tick: int
    time: float
    measure: float
    output: float
    proportion: Optional[float] = None
    integral: Optional[float] = None
    derivative: Optional[float] = None


class ControlLoop:
    """
    Closes a controller around a plant at a fixed period.

    On every tick the plant output is fed to the controller as its
    measurement and the controller output is fed back to the plant.
    """

    def __init__(
        self,
        controller: Updatable,
        plant: Updatable,
        *,
        dt: Optional[float] = None,
    ) -> None:
        self.controller = controller
        self.plant = plant
        self.dt = float(controller.dt if dt is None else dt)
        if self.dt <= 0:
            raise InvalidConfigurationError(f"loop period must be positive; got {self.dt}")
        self._tick = 0

    def step(self) -> LoopSample:
        measure = float(self.plant.output)
        output = self.controller.update(measure)
        self.plant.update(output)
        self._tick += 1
        return LoopSample(
            tick=self._tick,
            time=self._tick * self.dt,
            measure=measure,
            output=float(output),
            proportion=getattr(self.controller, "proportion", None),
            integral=getattr(self.controller, "integral", None),
            derivative=getattr(self.controller, "derivative", None),
        )

    def run(self, steps: int, *, rate_hz: Optional[float] = None) -> np.ndarray:
        """
        Run `steps` ticks and return the trace.

        Args:
            steps: number of ticks to perform.
            rate_hz: when set, ticks are paced in wall-clock time.

        Returns:
            np.ndarray of shape (n, 3) with columns (time, measure, output).
            n is smaller than `steps` only if the loop was interrupted.
        """
        if steps <= 0:
            raise InvalidConfigurationError(f"steps must be positive; got {steps}")
        if rate_hz is not None and not rate_hz > 0:
            raise InvalidConfigurationError(f"rate_hz must be positive; got {rate_hz}")
        period = None if rate_hz is None else 1.0 / rate_hz
        rows: List[List[float]] = []

        LOG.info("Starting control loop for %d ticks (dt=%g)", steps, self.dt)
        next_tick = time.perf_counter() + (period or 0.0)
        try:
            for _ in range(steps):
                sample = self.step()
                rows.append([sample.time, sample.measure, sample.output])
                if period is not None:
                    sleep_time = next_tick - time.perf_counter()
                    if sleep_time > 0:
                        time.sleep(sleep_time)
                    next_tick += period
        except KeyboardInterrupt:
            LOG.info("Control loop interrupted by user after %d ticks.", len(rows))
        LOG.info("Control loop finished; final measure %.6g", rows[-1][1] if rows else float("nan"))
        return np.asarray(rows, dtype=float).reshape(-1, 3)


__all__ = ["ControlLoop", "LoopSample"]
