"""hashicon: deterministic identicons from 20-byte hashes."""

from hashicon.engine import (
    DEFAULT_CONFIG,
    ConfigBuilder,
    ConfigError,
    ConfigErrorKind,
    IdenticonConfig,
    generate_identicon,
    render_identicon,
)
from hashicon.utils.imaging import encode_image, image_to_array, save_image

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigBuilder",
    "ConfigError",
    "ConfigErrorKind",
    "IdenticonConfig",
    "generate_identicon",
    "render_identicon",
    "encode_image",
    "image_to_array",
    "save_image",
]
