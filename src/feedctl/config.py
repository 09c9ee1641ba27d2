"""
Configuration helpers and defaults for feedctl controllers.

Gains default to unity on every term and the control period to one
millisecond.  The defaults can be overridden through environment variables
(`FEEDCTL_DT`, `FEEDCTL_KP`, `FEEDCTL_KI`, `FEEDCTL_KD`) so that simulation
scripts can be retuned without code changes.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union

from feedctl.errors import InvalidConfigurationError

DEFAULT_DT: float = 0.001
DEFAULT_KP: float = 1.0
DEFAULT_KI: float = 1.0
DEFAULT_KD: float = 1.0


@dataclass(frozen=True)
class ClampRange:
    """Closed interval [lo, hi] used to bound a PID term or the output."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        try:
            lo = float(self.lo)
            hi = float(self.hi)
        except (TypeError, ValueError) as exc:
            raise InvalidConfigurationError(f"clamp range bounds must be numbers; got ({self.lo!r}, {self.hi!r})") from exc
        if math.isnan(lo) or math.isnan(hi):
            raise InvalidConfigurationError(f"clamp range bounds must not be NaN; got ({lo}, {hi})")
        if lo > hi:
            raise InvalidConfigurationError(f"clamp range lower bound {lo} exceeds upper bound {hi}")
        object.__setattr__(self, "lo", lo)
        object.__setattr__(self, "hi", hi)

    @classmethod
    def coerce(cls, value: RangeLike) -> Optional["ClampRange"]:
        """Accept None, an existing range, or a (lo, hi) pair."""
        if value is None or isinstance(value, ClampRange):
            return value
        try:
            lo, hi = value
        except (TypeError, ValueError) as exc:
            raise InvalidConfigurationError(f"clamp range must be a (lo, hi) pair; got {value!r}") from exc
        return cls(lo, hi)

    def clamp(self, value: float) -> float:
        return min(max(value, self.lo), self.hi)

    def __contains__(self, value: float) -> bool:
        return self.lo <= value <= self.hi


RangeLike = Union[None, ClampRange, Tuple[float, float]]


@dataclass(frozen=True)
class PIDGains:
    """Proportional, integral and derivative gains."""

    kp: float = DEFAULT_KP
    ki: float = DEFAULT_KI
    kd: float = DEFAULT_KD

    @classmethod
    def from_tuning(cls, tuning: Mapping[str, float]) -> "PIDGains":
        """Build gains from a `PIDController.tune` result; absent terms are disabled."""
        return cls(
            kp=float(tuning["kp"]),
            ki=float(tuning.get("ki", 0.0)),
            kd=float(tuning.get("kd", 0.0)),
        )


@dataclass(frozen=True)
class PIDConfig:
    """
    Consolidated configuration for a PID controller.

    Ranges left as None keep the corresponding term unclamped.
    """

    setpoint: float = 0.0
    dt: float = DEFAULT_DT
    gains: PIDGains = PIDGains()
    p_range: Optional[ClampRange] = None
    i_range: Optional[ClampRange] = None
    d_range: Optional[ClampRange] = None
    o_range: Optional[ClampRange] = None

    def __post_init__(self) -> None:
        if not self.dt > 0:
            raise InvalidConfigurationError(f"dt must be positive; got {self.dt}")
        for name in ("p_range", "i_range", "d_range", "o_range"):
            object.__setattr__(self, name, ClampRange.coerce(getattr(self, name)))


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be a number; got {raw!r}") from exc


def build_default_config(setpoint: float = 0.0) -> PIDConfig:
    """
    Construct the standard PID configuration.

    Args:
        setpoint: initial target value.

    Returns:
        PIDConfig: defaults with any environment overrides applied.
    """

    gains = PIDGains(
        kp=_env_float("FEEDCTL_KP", DEFAULT_KP),
        ki=_env_float("FEEDCTL_KI", DEFAULT_KI),
        kd=_env_float("FEEDCTL_KD", DEFAULT_KD),
    )
    return PIDConfig(
        setpoint=setpoint,
        dt=_env_float("FEEDCTL_DT", DEFAULT_DT),
        gains=gains,
    )


__all__ = [
    "ClampRange",
    "PIDGains",
    "PIDConfig",
    "RangeLike",
    "DEFAULT_DT",
    "DEFAULT_KP",
    "DEFAULT_KI",
    "DEFAULT_KD",
    "build_default_config",
]
