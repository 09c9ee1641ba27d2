from __future__ import annotations

from feedctl.config import DEFAULT_DT
from feedctl.control.updatable import Updatable
from feedctl.errors import InvalidConfigurationError


class FirstOrderPlant(Updatable):
    """
    First-order lag plant discretised with forward Euler.

    y[k+1] = y[k] + dt * (gain * u[k] - y[k]) / tau

    The command `u` is the input slot; the output is the plant state `y`.
    """

    input_attr = "command"

    def __init__(self, gain: float = 1.0, tau: float = 1.0, dt: float = DEFAULT_DT, initial: float = 0.0) -> None:
        if tau <= 0:
            raise InvalidConfigurationError(f"time constant tau must be positive; got {tau}")
        if dt <= 0:
            raise InvalidConfigurationError(f"dt must be positive; got {dt}")
        self.gain = float(gain)
        self.tau = float(tau)
        self.dt = float(dt)
        self.state = float(initial)
        self._command = 0.0

    @property
    def command(self) -> float:
        return self._command

    @command.setter
    def command(self, value: float) -> None:
        self._command = float(value)
        self.state += self.dt * (self.gain * self._command - self.state) / self.tau

    @property
    def output(self) -> float:
        return self.state

    def __str__(self) -> str:
        return f"FirstOrderPlant(gain={self.gain}, tau={self.tau}, state={self.state:.6g})"


__all__ = ["FirstOrderPlant"]
