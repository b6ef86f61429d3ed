from __future__ import annotations

"""Built-in ramp definitions grouped by theme variant.

Saturation is tuned per hue so the ramps read with similar intensity:
red/orange are held back, yellow is kept high so it does not wash out,
blue/purple stay vivid. Dark-mode sets raise the lower lightness bound to
compensate for the dark background.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Tuple

from .color_types import ColorDefinition
from .errors import ConfigurationError
from .schedule import CHROMATIC_SCHEDULE, NEUTRAL_SCHEDULE, StepSchedule


class ThemeVariant(Enum):
    """Definition sets held by the registry."""

    LIGHT = "light"
    DARK = "dark"
    NEUTRAL = "neutral"

    @classmethod
    def from_flag(cls, dark_mode: bool) -> "ThemeVariant":
        return cls.DARK if dark_mode else cls.LIGHT

    @classmethod
    def from_value(cls, value: str) -> "ThemeVariant":
        for v in cls:
            if v.value == value:
                return v
        raise ValueError(f"Unknown theme variant: {value}")


def _defs(rows: Iterable[tuple[str, float, float, float, float]]) -> Tuple[ColorDefinition, ...]:
    return tuple(ColorDefinition(n, h, s, lo, hi) for n, h, s, lo, hi in rows)


# name, hue, saturation, min_lightness, max_lightness
LIGHT_DEFINITIONS = _defs(
    [
        ("Red", 10, 75, 5, 92),
        ("Orange", 30, 75, 7, 89),
        ("Yellow", 60, 80, 4, 96),
        ("Green", 120, 60, 3, 99),
        ("Cyan", 180, 75, 3, 98),
        ("Blue", 240, 75, 3, 95),
        ("Purple", 290, 75, 3, 95),
    ]
)

DARK_DEFINITIONS = _defs(
    [
        ("Red", 10, 90, 8, 93),
        ("Orange", 30, 90, 10, 93),
        ("Yellow", 60, 80, 10, 93),
        ("Green", 120, 70, 8, 98),
        ("Cyan", 180, 80, 8, 98),
        ("Blue", 240, 90, 8, 95),
        ("Purple", 290, 90, 8, 95),
    ]
)

NEUTRAL_DEFINITIONS = _defs(
    [
        ("Neutral0", 5, 0, 0, 100),
        ("Neutral1", 10, 0, 0, 100),
    ]
)


@dataclass(frozen=True)
class RampSpecRegistry:
    """Read-only collection of definition sets.

    The light and dark sets share the same hues; the neutral set is the
    same regardless of theme. Selecting between light and dark is driven by
    a theme flag owned by the caller.
    """

    light: Tuple[ColorDefinition, ...] = LIGHT_DEFINITIONS
    dark: Tuple[ColorDefinition, ...] = DARK_DEFINITIONS
    neutral_set: Tuple[ColorDefinition, ...] = NEUTRAL_DEFINITIONS
    chromatic_schedule: StepSchedule = CHROMATIC_SCHEDULE
    neutral_schedule: StepSchedule = NEUTRAL_SCHEDULE

    def __post_init__(self) -> None:
        for attr in ("light", "dark", "neutral_set"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))
        light_hues = [d.hue for d in self.light]
        dark_hues = [d.hue for d in self.dark]
        if light_hues != dark_hues:
            raise ConfigurationError(
                "registry", f"light and dark sets must share hues ({light_hues} != {dark_hues})"
            )

    def chromatic(self, dark_mode: bool) -> Tuple[ColorDefinition, ...]:
        """Return the chromatic set for the given theme flag."""
        return self.dark if dark_mode else self.light

    def neutral(self) -> Tuple[ColorDefinition, ...]:
        return self.neutral_set

    def definitions(self, variant: ThemeVariant) -> Tuple[ColorDefinition, ...]:
        if variant is ThemeVariant.LIGHT:
            return self.light
        if variant is ThemeVariant.DARK:
            return self.dark
        if variant is ThemeVariant.NEUTRAL:
            return self.neutral_set
        raise ValueError(f"Unsupported ThemeVariant: {variant}")

    def schedule_for(self, variant: ThemeVariant) -> StepSchedule:
        if variant is ThemeVariant.NEUTRAL:
            return self.neutral_schedule
        return self.chromatic_schedule

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "RampSpecRegistry":
        """Build a registry from a config mapping.

        ``data`` may hold ``light``, ``dark`` and ``neutral`` lists of
        mappings with ``name``, ``hue``, ``saturation`` (or ``sat``),
        ``min_lightness`` and ``max_lightness``. Missing keys keep the
        built-in sets.
        """
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError("registry", f"expected a mapping, got {type(data).__name__}")
        kwargs: dict[str, Tuple[ColorDefinition, ...]] = {}
        for key, attr in (("light", "light"), ("dark", "dark"), ("neutral", "neutral_set")):
            rows = data.get(key)
            if rows is None:
                continue
            if not isinstance(rows, (list, tuple)):
                raise ConfigurationError(key, "definition set must be a list")
            kwargs[attr] = tuple(_definition_from_mapping(row) for row in rows)
        return cls(**kwargs)


def _definition_from_mapping(row: Any) -> ColorDefinition:
    if not isinstance(row, Mapping):
        raise ConfigurationError("<unnamed>", f"definition must be a mapping, got {row!r}")
    name = row.get("name") or "<unnamed>"
    sat = row.get("saturation", row.get("sat"))
    missing = [
        k
        for k, v in (
            ("hue", row.get("hue")),
            ("saturation", sat),
            ("min_lightness", row.get("min_lightness")),
            ("max_lightness", row.get("max_lightness")),
        )
        if v is None
    ]
    if missing:
        raise ConfigurationError(str(name), f"missing fields: {', '.join(missing)}")
    return ColorDefinition(
        name=row.get("name"),
        hue=row["hue"],
        saturation=sat,
        min_lightness=row["min_lightness"],
        max_lightness=row["max_lightness"],
    )


DEFAULT_REGISTRY = RampSpecRegistry()


__all__ = [
    "ThemeVariant",
    "RampSpecRegistry",
    "DEFAULT_REGISTRY",
    "LIGHT_DEFINITIONS",
    "DARK_DEFINITIONS",
    "NEUTRAL_DEFINITIONS",
]
