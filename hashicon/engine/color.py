"""Colour model: HSL to RGB with perceptual lightness correction, and the palette.

No engine imports beyond the config record.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from hashicon.engine.config import RGBA, Bounds, IdenticonConfig

RGB = tuple[int, int, int]

# Perceived middle lightness for each 60-degree hue sixth (red, yellow,
# green, cyan, blue, magenta). Taken from jdenticon.
HSL_CORRECTORS = (0.55, 0.50, 0.50, 0.46, 0.60, 0.55)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _to_channel(value: float) -> int:
    return min(255, max(0, round_half_away(value * 255.0)))


def _hsl_to_rgb_float(h: float, s: float, l: float) -> tuple[float, float, float]:
    if s == 0.0:
        return (l, l, l)

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))

    sector = int(h % 360.0) // 60
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    m = l - c / 2.0
    return (r + m, g + m, b + m)


def hue_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL to 8-bit RGB.

    Args:
        h: Hue in degrees, expected in [0, 360).
        s: Saturation in [0, 1]. ``0`` short-circuits to gray.
        l: Lightness in [0, 1].
    """
    r, g, b = _hsl_to_rgb_float(h, s, l)
    return (_to_channel(r), _to_channel(g), _to_channel(b))


def corrected_lightness(h: float, l: float) -> float:
    """Remap lightness so 0.5 lands on the hue's perceived middle lightness."""
    corrector = HSL_CORRECTORS[int(h / 60.0) % 6]
    if l < 0.5:
        return l * corrector * 2.0
    return corrector + (l - 0.5) * (1.0 - corrector) * 2.0


def corrected_hue_to_rgb(h: float, s: float, l: float) -> RGB:
    """``hue_to_rgb`` with lightness corrected for the hue's sixth."""
    return hue_to_rgb(h, s, corrected_lightness(h, l))


def resolve_hue(hue: float, hues: tuple[float, ...]) -> float:
    """Snap ``hue`` onto the allowed hue set, if one is configured."""
    if not hues:
        return hue
    # The hue seed can reach exactly 360.0, which would index one past the end.
    index = min(int(hue / 360.0 * len(hues)), len(hues) - 1)
    return hues[index]


def resolve_lightness(bounds: Bounds, value: float) -> float:
    """Interpolate a relative lightness ``value`` into the configured range."""
    start, end = bounds
    return start + (end - start) * value


class ColorCandidates(NamedTuple):
    """The five palette colours, in role-index order."""

    dark_gray: RGBA
    mid_color: RGBA
    light_gray: RGBA
    light_color: RGBA
    dark_color: RGBA


def _rgba(rgb: RGB) -> RGBA:
    return (rgb[0], rgb[1], rgb[2], 255)


def palette(hue: float, config: IdenticonConfig) -> ColorCandidates:
    """Derive the five candidate colours for one render."""
    hue = resolve_hue(hue, config.hues)

    def gray(value: float) -> RGBA:
        lightness = resolve_lightness(config.grayscale_lightness, value)
        return _rgba(corrected_hue_to_rgb(hue, config.grayscale_saturation, lightness))

    def color(value: float) -> RGBA:
        lightness = resolve_lightness(config.color_lightness, value)
        return _rgba(corrected_hue_to_rgb(hue, config.color_saturation, lightness))

    return ColorCandidates(
        dark_gray=gray(0.0),
        mid_color=color(0.5),
        light_gray=gray(1.0),
        light_color=color(1.0),
        dark_color=color(0.0),
    )
