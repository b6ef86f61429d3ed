from __future__ import annotations

"""Step schedules: the ordered labels of a ramp's swatches.

Labels are display metadata only. Generation interpolates by ordinal
position, so the clustered tail of the chromatic schedule (90, 95, 100)
still receives evenly spaced lightness values.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .errors import ConfigurationError


@dataclass(frozen=True, init=False)
class StepSchedule:
    """Immutable, strictly increasing sequence of step labels.

    Parameters
    ----------
    labels:
        Step labels in display order. All labels lie in [0, 100].
    name:
        Identifier used in error messages.
    require_full_range:
        When True (default) the schedule must have at least two labels,
        start at 0 and end at 100.
    """

    labels: Tuple[float, ...]
    name: str = "schedule"
    require_full_range: bool = True

    def __init__(
        self,
        labels: Iterable[float],
        name: str = "schedule",
        *,
        require_full_range: bool = True,
    ) -> None:
        object.__setattr__(self, "labels", tuple(labels))
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "require_full_range", require_full_range)
        self._validate()

    def _validate(self) -> None:
        labels = self.labels
        if not labels:
            raise ConfigurationError(self.name, "schedule must contain at least one label")
        for v in labels:
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ConfigurationError(self.name, f"step label must be a number, got {v!r}")
            if not (0 <= v <= 100):
                raise ConfigurationError(self.name, f"step label {v} outside [0, 100]")
        for prev, cur in zip(labels, labels[1:]):
            if cur <= prev:
                raise ConfigurationError(
                    self.name, f"labels must be strictly increasing ({prev} then {cur})"
                )
        if self.require_full_range:
            if len(labels) < 2:
                raise ConfigurationError(self.name, "schedule must contain at least two labels")
            if labels[0] != 0 or labels[-1] != 100:
                raise ConfigurationError(
                    self.name, f"schedule must run from 0 to 100, got {labels[0]}..{labels[-1]}"
                )

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[float]:
        return iter(self.labels)

    def __getitem__(self, index: int) -> float:
        return self.labels[index]


CHROMATIC_SCHEDULE = StepSchedule(
    (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 100), name="chromatic"
)
NEUTRAL_SCHEDULE = StepSchedule(range(0, 101, 2), name="neutral")


__all__ = ["StepSchedule", "CHROMATIC_SCHEDULE", "NEUTRAL_SCHEDULE"]
