"""Identicon rendering engine."""

from hashicon.engine.color import ColorCandidates, corrected_hue_to_rgb, hue_to_rgb, palette
from hashicon.engine.compositor import generate_identicon, paint_identicon, render_identicon
from hashicon.engine.config import (
    DEFAULT_CONFIG,
    ConfigBuilder,
    ConfigError,
    ConfigErrorKind,
    IdenticonConfig,
)
from hashicon.engine.renderer import ShapeRenderer

__all__ = [
    "ColorCandidates",
    "corrected_hue_to_rgb",
    "hue_to_rgb",
    "palette",
    "generate_identicon",
    "paint_identicon",
    "render_identicon",
    "DEFAULT_CONFIG",
    "ConfigBuilder",
    "ConfigError",
    "ConfigErrorKind",
    "IdenticonConfig",
    "ShapeRenderer",
]
