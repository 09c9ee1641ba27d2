from __future__ import annotations

from feedctl.control.updatable import Updatable


class Device(Updatable):
    """Generic pass-through device: the output follows the input."""

    def __init__(self, value: float = 0.0) -> None:
        self.input = float(value)

    @property
    def output(self) -> float:
        return float(self.input)

    def __str__(self) -> str:
        return f"Device(input={self.input}, output={self.output})"


class Heater(Updatable):
    """
    Heating element rated at `watts`.

    The knob is the input slot and scales the rated power; a knob at or below
    zero produces no heat and values above one are capped at full power.
    """

    input_attr = "knob"

    def __init__(self, watts: float) -> None:
        self.watts = watts
        self.knob = 0

    @property
    def output(self) -> float:
        return self.watts * min(max(self.knob, 0), 1)

    def __str__(self) -> str:
        return f"Heater({self.watts} W, knob={self.knob}, output={self.output} W)"


class Controller(Updatable):
    """Stateless error controller: output is setpoint minus measure."""

    input_attr = "measure"

    def __init__(self, setpoint: float) -> None:
        self.setpoint = setpoint
        self.measure = 0.0

    @property
    def output(self) -> float:
        return float(self.setpoint - self.measure)

    def __str__(self) -> str:
        return f"{type(self).__name__}(setpoint={self.setpoint}, measure={self.measure})"


class Thermostat(Controller):
    """Bang-bang controller: on while the measure is below the setpoint."""

    @property
    def output(self) -> bool:
        return self.measure < self.setpoint


__all__ = ["Device", "Heater", "Controller", "Thermostat"]
