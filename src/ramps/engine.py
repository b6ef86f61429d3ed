from __future__ import annotations

"""Color conversion engine for HSLuv and sRGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that delegates the perceptual HSLuv → sRGB conversion to
the ``hsluv`` reference implementation.
"""

from typing import Protocol, Tuple

import hsluv


SRGB = Tuple[float, float, float]


class ColorEngine(Protocol):
    """Protocol abstracting the HSLuv → sRGB conversion primitive."""

    def hsluv_to_rgb(self, h: float, s: float, l: float) -> SRGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation backed by the ``hsluv`` package."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return (h % 360.0 + 360.0) % 360.0

    def hsluv_to_rgb(self, h: float, s: float, l: float) -> SRGB:
        """Convert HSLuv (h in degrees, s and l in [0, 100]) to sRGB in [0, 1].

        Channels may fall marginally outside [0, 1] because of floating
        point error; callers clamp after scaling.
        """
        r, g, b = hsluv.hsluv_to_rgb((self.normalize_hue(h), float(s), float(l)))
        return (float(r), float(g), float(b))
