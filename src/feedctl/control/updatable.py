from __future__ import annotations

from typing import Any

from feedctl.errors import MissingCapabilityError


class Updatable:
    """
    Mixin providing the update-then-read pattern.

    Subclasses name their input slot through `input_attr` and supply an
    `output` property.  `update` stores the value in that slot and returns the
    freshly computed output; the mixin never computes an output itself.
    """

    input_attr = "input"

    @property
    def output(self) -> Any:
        raise MissingCapabilityError(
            f"{type(self).__name__} includes Updatable but defines no output"
        )

    def update(self, value: Any) -> Any:
        setattr(self, self.input_attr, value)
        return self.output


__all__ = ["Updatable"]
