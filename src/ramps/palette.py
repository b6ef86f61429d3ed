from __future__ import annotations

"""Container type for generated palettes.

This module defines the :class:`Palette` dataclass, which groups the
generated ramps with the step schedule they were generated on.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .color_types import ColorRamp
from .schedule import StepSchedule


@dataclass(frozen=True)
class Palette:
    """Generated palette.

    Attributes
    ----------
    ramps:
        One ramp per definition, in definition order.
    schedule:
        Schedule shared by every ramp. Exporters check each ramp's entry
        count against it.
    """

    ramps: Tuple[ColorRamp, ...]
    schedule: StepSchedule

    def __post_init__(self) -> None:
        object.__setattr__(self, "ramps", tuple(self.ramps))

    def __len__(self) -> int:
        return len(self.ramps)

    def __iter__(self) -> Iterator[ColorRamp]:
        return iter(self.ramps)

    @property
    def names(self) -> list[str]:
        return [r.name for r in self.ramps]

    @classmethod
    def empty(cls, schedule: StepSchedule) -> "Palette":
        return cls(ramps=(), schedule=schedule)
