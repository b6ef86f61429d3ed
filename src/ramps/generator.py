from __future__ import annotations

"""Ramp generation.

This module turns a :class:`ColorDefinition` and a :class:`StepSchedule`
into a concrete :class:`ColorRamp`, and whole definition sets into a
:class:`Palette`. Everything here is a pure function of its inputs.
"""

from typing import List, Optional, Sequence

from .color_types import (
    ColorDefinition,
    ColorRamp,
    RampEntry,
    channel_to_u8,
    format_number,
    rgb_to_hex,
    round_half_up,
)
from .engine import ColorEngine, DefaultColorEngine
from .palette import Palette
from .registry import DEFAULT_REGISTRY, RampSpecRegistry, ThemeVariant
from .schedule import StepSchedule


def interpolate_lightness(definition: ColorDefinition, n: int) -> List[int]:
    """Return ``n`` lightness values evenly spaced by position.

    The first value equals ``min_lightness`` and the last ``max_lightness``;
    with a single position only ``min_lightness`` is produced.
    """
    if n <= 0:
        raise ValueError("n must be positive.")
    lo = definition.min_lightness
    hi = definition.max_lightness
    if n == 1:
        return [round_half_up(lo)]
    return [round_half_up(lo + (hi - lo) * i / (n - 1)) for i in range(n)]


def generate_ramp(
    definition: ColorDefinition,
    schedule: StepSchedule,
    engine: Optional[ColorEngine] = None,
) -> ColorRamp:
    """Generate the ramp for one definition.

    Parameters
    ----------
    definition:
        Validated ramp parameters.
    schedule:
        Step labels. Only its length drives interpolation; labels are copied
        onto the entries as display metadata.
    engine:
        Optional ColorEngine. If None, DefaultColorEngine is used.

    Returns
    -------
    ColorRamp
        Ramp with exactly ``len(schedule)`` entries in schedule order.
    """
    definition.validate()
    if engine is None:
        engine = DefaultColorEngine()

    hue = definition.hue
    sat = definition.saturation
    entries: list[RampEntry] = []
    for step, lightness in zip(schedule, interpolate_lightness(definition, len(schedule))):
        r, g, b = engine.hsluv_to_rgb(hue, sat, lightness)
        rgb = (channel_to_u8(r), channel_to_u8(g), channel_to_u8(b))
        entries.append(
            RampEntry(
                step=step,
                lightness=lightness,
                hex=rgb_to_hex(rgb),
                rgb=rgb,
                descriptor=f"hsl({format_number(hue)},{format_number(sat)},{lightness})",
            )
        )
    return ColorRamp(name=definition.name, hue=hue, saturation=sat, entries=tuple(entries))


def generate_palette(
    definitions: Sequence[ColorDefinition],
    schedule: StepSchedule,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate one ramp per definition, preserving input order."""
    if engine is None:
        engine = DefaultColorEngine()
    ramps = tuple(generate_ramp(d, schedule, engine) for d in definitions)
    return Palette(ramps=ramps, schedule=schedule)


def palette_for_theme(
    dark_mode: bool,
    *,
    neutral: bool = False,
    registry: Optional[RampSpecRegistry] = None,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate the chromatic (or neutral) palette for a theme flag.

    The neutral set ignores ``dark_mode``.
    """
    if registry is None:
        registry = DEFAULT_REGISTRY
    variant = ThemeVariant.NEUTRAL if neutral else ThemeVariant.from_flag(dark_mode)
    return generate_palette(
        registry.definitions(variant), registry.schedule_for(variant), engine
    )


__all__ = [
    "interpolate_lightness",
    "generate_ramp",
    "generate_palette",
    "palette_for_theme",
]
