"""Example devices and plants built on the Updatable contract."""

from .examples import Controller, Device, Heater, Thermostat
from .plant import FirstOrderPlant

__all__ = [
    "Controller",
    "Device",
    "FirstOrderPlant",
    "Heater",
    "Thermostat",
]
