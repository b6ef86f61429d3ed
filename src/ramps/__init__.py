"""Public entrypoint for the HSLuv ramp library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``ramps`` instead of individual
submodules.
"""

from .color_types import (
    ColorDefinition,
    ColorRamp,
    RampEntry,
    TextContrast,
    hex_to_rgb,
    lightness_from_descriptor,
    rgb_to_hex,
    text_contrast,
)
from .engine import ColorEngine, DefaultColorEngine
from .errors import ConfigurationError, DeliveryError, RampError, SerializationError
from .export import (
    EXPORT_FORMAT_OPTIONS,
    ExportDocument,
    ExportFormat,
    export_palette,
    to_csv,
    to_design_tokens,
    to_figma_styles,
    to_json,
)
from .generator import generate_palette, generate_ramp, palette_for_theme
from .palette import Palette
from .registry import DEFAULT_REGISTRY, RampSpecRegistry, ThemeVariant
from .schedule import CHROMATIC_SCHEDULE, NEUTRAL_SCHEDULE, StepSchedule

__all__ = [
    "ColorDefinition",
    "ColorRamp",
    "RampEntry",
    "TextContrast",
    "text_contrast",
    "lightness_from_descriptor",
    "hex_to_rgb",
    "rgb_to_hex",
    "ColorEngine",
    "DefaultColorEngine",
    "RampError",
    "ConfigurationError",
    "SerializationError",
    "DeliveryError",
    "ExportFormat",
    "ExportDocument",
    "EXPORT_FORMAT_OPTIONS",
    "export_palette",
    "to_json",
    "to_csv",
    "to_design_tokens",
    "to_figma_styles",
    "generate_ramp",
    "generate_palette",
    "palette_for_theme",
    "Palette",
    "RampSpecRegistry",
    "DEFAULT_REGISTRY",
    "ThemeVariant",
    "StepSchedule",
    "CHROMATIC_SCHEDULE",
    "NEUTRAL_SCHEDULE",
]
