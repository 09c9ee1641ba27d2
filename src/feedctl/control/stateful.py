from __future__ import annotations

import numpy as np

from feedctl.config import DEFAULT_DT
from feedctl.control.updatable import Updatable
from feedctl.errors import InvalidConfigurationError


class StatefulController(Updatable):
    """
    Setpoint controller that tracks error history across ticks.

    Each `update` shifts `error` into `last_error`, recomputes `error` from the
    new measurement and integrates it into `sum_error` over the fixed period
    `dt`.  The integral restarts from the current sample whenever the sign of
    the error changes (including to or from exactly zero), which bounds
    windup after the process crosses the setpoint.

    Instances are not thread-safe: `update` reads and rewrites `last_error`
    and `sum_error`, so concurrent callers must hold an external lock.
    """

    input_attr = "measure"

    def __init__(self, setpoint: float, dt: float = DEFAULT_DT) -> None:
        self.setpoint = setpoint
        self.dt = dt
        self.measure = 0.0
        self.error = 0.0
        self.last_error = 0.0
        self.sum_error = 0.0

    @property
    def dt(self) -> float:
        return self._dt

    @dt.setter
    def dt(self, value: float) -> None:
        if not value > 0:
            raise InvalidConfigurationError(f"dt must be positive; got {value}")
        self._dt = value

    @property
    def output(self) -> float:
        return self.error

    def update(self, measure: float) -> float:
        self.last_error = self.error
        self.measure = measure
        self.error = self.setpoint - measure
        if np.sign(self.error) != np.sign(self.last_error):
            self.sum_error = self.error * self.dt
        else:
            self.sum_error += self.error * self.dt
        return self.output

    def reset(self) -> None:
        self.measure = 0.0
        self.error = 0.0
        self.last_error = 0.0
        self.sum_error = 0.0

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(setpoint={self.setpoint}, measure={self.measure}, "
            f"error={self.error}, sum_error={self.sum_error})"
        )


__all__ = ["StatefulController"]
