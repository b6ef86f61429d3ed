from __future__ import annotations

"""Core record types used by the ramp engine.

This module defines explicit, validated data structures for ramp
definitions and generated swatches, plus the small hex/RGB helpers the
generator and the exporters share.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import ConfigurationError


RGB255 = Tuple[int, int, int]

CONTRAST_THRESHOLD = 50

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
_DESCRIPTOR_RE = re.compile(r"^hsl\(([^,]+),([^,]+),([^,]+)\)$")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away towards +inf."""
    return int(math.floor(x + 0.5))


def format_number(x: float) -> str:
    """Format a number the way it appears in descriptors (``10`` not ``10.0``)."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def channel_to_u8(c: float) -> int:
    """Scale a [0, 1] channel to 0–255, rounding half-up and clamping."""
    return max(0, min(255, round_half_up(c * 255)))


def rgb_to_hex(rgb: RGB255) -> str:
    """Return ``#rrggbb`` (lowercase) for 0–255 integer channels."""
    for v in rgb:
        if not (0 <= int(v) <= 255):
            raise ValueError(f"RGB channel out of range: {v}")
    r, g, b = (int(v) for v in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: str) -> RGB255:
    """Parse ``#rrggbb`` into 0–255 integer channels."""
    if not _HEX_RE.match(hex_str):
        raise ValueError(f"invalid hex color: {hex_str!r} (expected #rrggbb)")
    return (int(hex_str[1:3], 16), int(hex_str[3:5], 16), int(hex_str[5:7], 16))


class TextContrast(Enum):
    """Text overlay to use on top of a swatch."""

    DARK = "black"
    LIGHT = "white"


def text_contrast(lightness: float) -> TextContrast:
    """Dark text from lightness 50 upwards, light text below."""
    return TextContrast.DARK if lightness >= CONTRAST_THRESHOLD else TextContrast.LIGHT


def lightness_from_descriptor(descriptor: str) -> int:
    """Extract the lightness component from an ``hsl(h,s,l)`` descriptor."""
    m = _DESCRIPTOR_RE.match(descriptor.strip())
    if not m:
        raise ValueError(f"invalid descriptor: {descriptor!r}")
    return int(float(m.group(3)))


@dataclass(frozen=True)
class ColorDefinition:
    """Parameters of one ramp.

    Attributes
    ----------
    name:
        Display name, e.g. ``"Red"``.
    hue:
        HSLuv hue in [0, 360).
    saturation:
        HSLuv saturation in [0, 100].
    min_lightness, max_lightness:
        Lightness bounds in [0, 100] with ``min_lightness <= max_lightness``.
    """

    name: str
    hue: float
    saturation: float
    min_lightness: float
    max_lightness: float

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if any field is out of range."""
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError("<unnamed>", "name must be a non-empty string")
        label = self.name
        for field_name in ("hue", "saturation", "min_lightness", "max_lightness"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(label, f"{field_name} must be a number, got {value!r}")
            if math.isnan(value):
                raise ConfigurationError(label, f"{field_name} must not be NaN")
        if not (0 <= self.hue < 360):
            raise ConfigurationError(label, f"hue {self.hue} outside [0, 360)")
        if not (0 <= self.saturation <= 100):
            raise ConfigurationError(label, f"saturation {self.saturation} outside [0, 100]")
        for field_name in ("min_lightness", "max_lightness"):
            value = getattr(self, field_name)
            if not (0 <= value <= 100):
                raise ConfigurationError(label, f"{field_name} {value} outside [0, 100]")
        if self.min_lightness > self.max_lightness:
            raise ConfigurationError(
                label,
                f"min_lightness {self.min_lightness} exceeds max_lightness {self.max_lightness}",
            )


@dataclass(frozen=True)
class RampEntry:
    """One generated swatch.

    ``step`` is display metadata copied from the schedule; ``lightness`` is
    the interpolated value actually fed to the color engine.
    """

    step: float
    lightness: int
    hex: str
    rgb: RGB255
    descriptor: str

    @property
    def rgb_string(self) -> str:
        r, g, b = self.rgb
        return f"rgb({r},{g},{b})"

    @property
    def text_contrast(self) -> TextContrast:
        return text_contrast(self.lightness)


@dataclass(frozen=True)
class ColorRamp:
    """Generated ramp for one :class:`ColorDefinition`."""

    name: str
    hue: float
    saturation: float
    entries: Tuple[RampEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def hex_values(self) -> list[str]:
        return [e.hex for e in self.entries]


__all__ = [
    "RGB255",
    "CONTRAST_THRESHOLD",
    "ColorDefinition",
    "RampEntry",
    "ColorRamp",
    "TextContrast",
    "text_contrast",
    "lightness_from_descriptor",
    "round_half_up",
    "format_number",
    "channel_to_u8",
    "rgb_to_hex",
    "hex_to_rgb",
]
