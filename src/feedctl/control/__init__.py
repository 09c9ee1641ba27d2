"""Control-layer exports."""

from .loop import ControlLoop, LoopSample
from .pid import PIDController
from .stateful import StatefulController
from .updatable import Updatable

__all__ = ["ControlLoop", "LoopSample", "PIDController", "StatefulController", "Updatable"]
