"""
Discrete-time feedback control toolkit.

Modules within `feedctl` expose:
  - the `Updatable` contract shared by controllers and devices
  - error-tracking and PID controllers with clamped terms and tuning helpers
  - a fixed-cadence loop that closes a controller around a plant
  - small example devices and plants for simulation

Controllers keep no knowledge of the devices they drive so that both
simulations and host applications can reuse them.
"""

from .control import ControlLoop, PIDController, StatefulController, Updatable
from .errors import InvalidConfigurationError, MissingCapabilityError

__all__ = [
    "ControlLoop",
    "InvalidConfigurationError",
    "MissingCapabilityError",
    "PIDController",
    "StatefulController",
    "Updatable",
]
