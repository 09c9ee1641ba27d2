from __future__ import annotations

import logging
from typing import Dict, Optional

from feedctl.config import DEFAULT_DT, DEFAULT_KD, DEFAULT_KI, DEFAULT_KP, ClampRange, PIDConfig, RangeLike
from feedctl.control.stateful import StatefulController
from feedctl.errors import InvalidConfigurationError

LOG = logging.getLogger(__name__)

# Ziegler-Nichols closed-loop rules: (kp / ku, tu / ti, tu / td)
_ZIEGLER_NICHOLS = {
    "P": (0.5, None, None),
    "PI": (0.45, 1.2, None),
    "PID": (0.6, 2.0, 8.0),
}


class PIDController(StatefulController):
    """
    PID controller with independently clamped terms and a clamped output.

    Terms are computed from the error bookkeeping of `StatefulController`:
    proportion from the current error, integral from the windup-limited error
    sum and derivative from the error slope over `dt`.  Each term, and then
    their sum, is clamped into its range when one is configured.
    """

    def __init__(
        self,
        setpoint: float,
        dt: float = DEFAULT_DT,
        kp: float = DEFAULT_KP,
        ki: float = DEFAULT_KI,
        kd: float = DEFAULT_KD,
    ) -> None:
        super().__init__(setpoint, dt=dt)
        self.kp = float(kp)
        self.ki = float(ki)
        self.kd = float(kd)
        self._p_range: Optional[ClampRange] = None
        self._i_range: Optional[ClampRange] = None
        self._d_range: Optional[ClampRange] = None
        self._o_range: Optional[ClampRange] = None
        self._proportion = 0.0
        self._integral = 0.0
        self._derivative = 0.0
        self._output = 0.0

    @classmethod
    def from_config(cls, config: PIDConfig) -> "PIDController":
        pid = cls(
            config.setpoint,
            dt=config.dt,
            kp=config.gains.kp,
            ki=config.gains.ki,
            kd=config.gains.kd,
        )
        pid.p_range = config.p_range
        pid.i_range = config.i_range
        pid.d_range = config.d_range
        pid.o_range = config.o_range
        return pid

    # ------------------------------------------------------------------ ranges
    def _set_range(self, name: str, value: RangeLike) -> None:
        clamp_range = ClampRange.coerce(value)
        setattr(self, f"_{name}", clamp_range)
        LOG.debug("%s set to %s", name, clamp_range)

    @property
    def p_range(self) -> Optional[ClampRange]:
        return self._p_range

    @p_range.setter
    def p_range(self, value: RangeLike) -> None:
        self._set_range("p_range", value)

    @property
    def i_range(self) -> Optional[ClampRange]:
        return self._i_range

    @i_range.setter
    def i_range(self, value: RangeLike) -> None:
        self._set_range("i_range", value)

    @property
    def d_range(self) -> Optional[ClampRange]:
        return self._d_range

    @d_range.setter
    def d_range(self, value: RangeLike) -> None:
        self._set_range("d_range", value)

    @property
    def o_range(self) -> Optional[ClampRange]:
        return self._o_range

    @o_range.setter
    def o_range(self, value: RangeLike) -> None:
        self._set_range("o_range", value)

    # ------------------------------------------------------------------ terms
    @property
    def proportion(self) -> float:
        return self._proportion

    @property
    def integral(self) -> float:
        return self._integral

    @property
    def derivative(self) -> float:
        return self._derivative

    @property
    def output(self) -> float:
        return self._output

    @staticmethod
    def _clamp(value: float, clamp_range: Optional[ClampRange]) -> float:
        if clamp_range is None:
            return value
        return clamp_range.clamp(value)

    def update(self, measure: float) -> float:
        super().update(measure)
        self._proportion = self._clamp(self.kp * self.error, self._p_range)
        self._integral = self._clamp(self.ki * self.sum_error, self._i_range)
        self._derivative = self._clamp(self.kd * (self.error - self.last_error) / self.dt, self._d_range)
        self._output = self._clamp(self._proportion + self._integral + self._derivative, self._o_range)
        return self._output

    def reset(self) -> None:
        super().reset()
        self._proportion = 0.0
        self._integral = 0.0
        self._derivative = 0.0
        self._output = 0.0

    # ------------------------------------------------------------------ tuning
    @staticmethod
    def tune(mode: str, ku: float, tu: float) -> Dict[str, float]:
        """
        Ziegler-Nichols closed-loop tuning.

        Args:
            mode: "P", "PI" or "PID".
            ku: ultimate gain at which the loop oscillates steadily.
            tu: period of that oscillation in seconds.

        Returns:
            dict with kp and, depending on mode, ki, kd, ti and td.  Keys that
            do not apply to the mode are absent rather than zero.
        """
        if mode not in _ZIEGLER_NICHOLS:
            raise InvalidConfigurationError(
                f"tuning mode must be one of {sorted(_ZIEGLER_NICHOLS)}; got {mode!r}"
            )
        if not ku > 0:
            raise InvalidConfigurationError(f"ultimate gain ku must be positive; got {ku}")
        if not tu > 0:
            raise InvalidConfigurationError(f"oscillation period tu must be positive; got {tu}")

        kp_ratio, ti_div, td_div = _ZIEGLER_NICHOLS[mode]
        kp = kp_ratio * ku
        result: Dict[str, float] = {"kp": kp}
        if ti_div is not None:
            ti = tu / ti_div
            result["ti"] = ti
            result["ki"] = kp / ti
        if td_div is not None:
            td = tu / td_div
            result["td"] = td
            result["kd"] = kp * td
        LOG.debug("Ziegler-Nichols %s tuning for ku=%s tu=%s: %s", mode, ku, tu, result)
        return result

    def __str__(self) -> str:
        return (
            f"PIDController(setpoint={self.setpoint}, kp={self.kp}, ki={self.ki}, kd={self.kd}, "
            f"P={self._proportion}, I={self._integral}, D={self._derivative}, output={self._output})"
        )


__all__ = ["PIDController"]
