from __future__ import annotations

"""Palette serializers.

Four pure transforms turn a :class:`Palette` into the documents consumed
by downstream tooling: generic JSON, CSV for spreadsheets, a DTCG token
tree and a Figma style map. :func:`export_palette` wraps any of them into
an :class:`ExportDocument` ready for delivery.

The JSON field names (``sat``, ``step``, ``rgba``, ``hsl``) and the Figma
``paints`` list are a fixed wire contract shared with existing exports.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List

from .color_types import ColorRamp, format_number, hex_to_rgb
from .errors import SerializationError
from .palette import Palette


DTCG_SCHEMA_URL = "https://design-tokens.github.io/community-group/format/"


class ExportFormat(Enum):
    """Supported export documents."""

    JSON = "json"
    CSV = "csv"
    DESIGN_TOKENS = "tokens"
    FIGMA = "figma"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")

    @property
    def filename(self) -> str:
        return _FILENAMES[self]

    @property
    def mime_type(self) -> str:
        return "text/csv" if self is ExportFormat.CSV else "application/json"


_FILENAMES: Dict[ExportFormat, str] = {
    ExportFormat.JSON: "color_palette.json",
    ExportFormat.CSV: "color_palette.csv",
    ExportFormat.DESIGN_TOKENS: "design_tokens.json",
    ExportFormat.FIGMA: "figma_color_styles.json",
}

# Label/Enum pairs for UI choices
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("Export JSON", ExportFormat.JSON),
    ("Export CSV", ExportFormat.CSV),
    ("Export Design Tokens", ExportFormat.DESIGN_TOKENS),
    ("Export to Figma", ExportFormat.FIGMA),
]


@dataclass(frozen=True)
class ExportDocument:
    """Serialized export, identical for every delivery channel."""

    format: ExportFormat
    payload: str
    filename: str
    mime_type: str


def _check_ramp(ramp: ColorRamp, expected: int) -> None:
    if len(ramp.entries) != expected:
        raise SerializationError(ramp.name, expected, len(ramp.entries))


def _checked_ramps(palette: Palette) -> tuple[ColorRamp, ...]:
    expected = len(palette.schedule)
    for ramp in palette.ramps:
        _check_ramp(ramp, expected)
    return palette.ramps


def _step_key(step: float) -> str:
    return format_number(step)


def _json_number(x: float) -> float:
    # 10.0 -> 10, matching the descriptor text
    if isinstance(x, float) and x.is_integer():
        return int(x)
    return x


def dump_document(tree: Any) -> str:
    """Serialize a document tree as two-space indented JSON."""
    return json.dumps(tree, indent=2, ensure_ascii=False)


def to_json(palette: Palette) -> str:
    """Dump the palette structure as JSON text.

    Keys are ``name``/``hue``/``sat``/``colorRamp[{step, hex, rgba, hsl}]``;
    consumers of the existing color_palette.json files read these names.
    Integral numbers are written without a fractional part.
    """
    out = []
    for ramp in _checked_ramps(palette):
        out.append(
            {
                "name": ramp.name,
                "hue": _json_number(ramp.hue),
                "sat": _json_number(ramp.saturation),
                "colorRamp": [
                    {
                        "step": _json_number(e.step),
                        "hex": e.hex,
                        "rgba": e.rgb_string,
                        "hsl": e.descriptor,
                    }
                    for e in ramp.entries
                ],
            }
        )
    return dump_document(out)


def to_csv(palette: Palette) -> str:
    """Return ``Color Name,<labels>`` followed by one row of hex values per color."""
    ramps = _checked_ramps(palette)
    lines = ["Color Name," + ",".join(_step_key(s) for s in palette.schedule)]
    for ramp in ramps:
        lines.append(ramp.name + "," + ",".join(ramp.hex_values()))
    return "\n".join(lines) + "\n"


def to_design_tokens(palette: Palette) -> Dict[str, Any]:
    """Return a DTCG-shaped token tree.

    Tokens are keyed by the lowercased color name only, so light and dark
    palettes exported side by side land on the same keys.
    """
    color: Dict[str, Dict[str, Dict[str, str]]] = {}
    for ramp in _checked_ramps(palette):
        group: Dict[str, Dict[str, str]] = {}
        for e in ramp.entries:
            group[_step_key(e.step)] = {"value": e.hex}
        color[ramp.name.lower()] = group
    return {"$schema": DTCG_SCHEMA_URL, "color": color}


def to_figma_styles(palette: Palette) -> Dict[str, Any]:
    """Return a Figma color style map keyed ``color/<name>/<step>``.

    Channel values are the hex channels divided by 255, as Figma expects.
    Each style carries a single opaque ``SOLID`` paint in ``paints`` with
    ``blendMode: NORMAL``, the shape Figma's style import reads.
    """
    styles: Dict[str, Any] = {}
    for ramp in _checked_ramps(palette):
        for e in ramp.entries:
            step = _step_key(e.step)
            key = f"color/{ramp.name.lower()}/{step}"
            r, g, b = hex_to_rgb(e.hex)
            styles[key] = {
                "name": key,
                "description": f"{ramp.name} {step}",
                "paints": [
                    {
                        "type": "SOLID",
                        "visible": True,
                        "opacity": 1,
                        "blendMode": "NORMAL",
                        "color": {"r": r / 255, "g": g / 255, "b": b / 255},
                    }
                ],
            }
    return styles


_SERIALIZERS: Dict[ExportFormat, Callable[[Palette], str]] = {
    ExportFormat.JSON: to_json,
    ExportFormat.CSV: to_csv,
    ExportFormat.DESIGN_TOKENS: lambda p: dump_document(to_design_tokens(p)),
    ExportFormat.FIGMA: lambda p: dump_document(to_figma_styles(p)),
}


def export_palette(palette: Palette, fmt: ExportFormat | str) -> ExportDocument:
    """Serialize a palette into the requested format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    payload = _SERIALIZERS[export_fmt](palette)
    return ExportDocument(
        format=export_fmt,
        payload=payload,
        filename=export_fmt.filename,
        mime_type=export_fmt.mime_type,
    )


__all__ = [
    "DTCG_SCHEMA_URL",
    "ExportFormat",
    "ExportDocument",
    "EXPORT_FORMAT_OPTIONS",
    "dump_document",
    "to_json",
    "to_csv",
    "to_design_tokens",
    "to_figma_styles",
    "export_palette",
]
