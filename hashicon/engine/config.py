"""Identicon configuration: the validated parameter record plus its builder.

``IdenticonConfig`` can be constructed directly, but nothing is checked on
that path. ``IdenticonConfig.builder()`` validates every option and raises
``ConfigError`` for the first violated constraint.
"""

from __future__ import annotations

import enum
import numbers
from collections.abc import Iterable
from dataclasses import dataclass, replace

from PIL import ImageColor

RGBA = tuple[int, int, int, int]
Bounds = tuple[float, float]

WHITE: RGBA = (255, 255, 255, 255)


@dataclass(frozen=True)
class IdenticonConfig:
    """Rendering parameters. All ranges are inclusive."""

    # Allowed hues in degrees, each in [0, 360). Empty means any hue.
    hues: tuple[float, ...] = ()
    # Lightness of coloured shapes, a sub-range of [0, 1].
    color_lightness: Bounds = (0.4, 0.8)
    # Lightness of grayscale shapes, a sub-range of [0, 1].
    grayscale_lightness: Bounds = (0.3, 0.9)
    color_saturation: float = 0.5
    grayscale_saturation: float = 0.0
    background_color: RGBA = WHITE
    # Padding around the grid relative to size, in [0, 0.5].
    padding: float = 0.08
    size: int = 256

    @classmethod
    def builder(cls) -> ConfigBuilder:
        return ConfigBuilder()


DEFAULT_CONFIG = IdenticonConfig()


class ConfigErrorKind(enum.Enum):
    INVALID_HUES = "hues must be within the range [0.0, 360.0)"
    INVALID_COLOR_LIGHTNESS = "color lightness must be within the range 0.0..=1.0"
    INVALID_GRAYSCALE_LIGHTNESS = "grayscale lightness must be within the range 0.0..=1.0"
    INVALID_COLOR_SATURATION = "color saturation must be within the range [0.0, 1.0]"
    INVALID_GRAYSCALE_SATURATION = "grayscale saturation must be within the range [0.0, 1.0]"
    INVALID_PADDING = "padding must be within the range [0.0, 0.5]"
    INVALID_SIZE = "size must be a positive integer"
    INVALID_BACKGROUND_COLOR = "background color must be an RGB(A) tuple or a color string"


class ConfigError(ValueError):
    """Raised by ``ConfigBuilder`` when an option is out of range."""

    def __init__(self, kind: ConfigErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def normalize_bounds(bounds: tuple[float | None, float | None]) -> Bounds:
    """Turn a ``(start, end)`` pair into an inclusive range; ``None`` is open."""
    start, end = bounds
    return (0.0 if start is None else float(start), 1.0 if end is None else float(end))


def to_rgba(color: str | Iterable[int]) -> RGBA:
    """Normalise a Pillow colour string or an RGB/RGBA tuple of ints to RGBA."""
    if isinstance(color, str):
        try:
            value = ImageColor.getcolor(color, "RGBA")
        except ValueError as e:
            raise ConfigError(ConfigErrorKind.INVALID_BACKGROUND_COLOR) from e
        return value  # type: ignore[return-value]

    try:
        channels = tuple(color)
    except TypeError as e:
        raise ConfigError(ConfigErrorKind.INVALID_BACKGROUND_COLOR) from e
    if len(channels) == 3:
        channels = (*channels, 255)
    if len(channels) != 4 or not all(_is_channel(c) for c in channels):
        raise ConfigError(ConfigErrorKind.INVALID_BACKGROUND_COLOR)
    return tuple(int(c) for c in channels)  # type: ignore[return-value]


def _is_channel(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and 0 <= value <= 255


def _valid_bounds(bounds: Bounds) -> bool:
    start, end = bounds
    return 0.0 <= start <= end <= 1.0


class ConfigBuilder:
    """Chainable builder for ``IdenticonConfig``.

    Usage:
        config = (
            IdenticonConfig.builder()
            .size(512)
            .padding(0.1)
            .background_color("#00000000")
            .build()
        )
    """

    def __init__(self, base: IdenticonConfig | None = None) -> None:
        self._config = base or DEFAULT_CONFIG
        # Raw colour, parsed by build().
        self._background: str | Iterable[int] | None = None

    def _set(self, **changes) -> ConfigBuilder:
        self._config = replace(self._config, **changes)
        return self

    def hues(self, hues: Iterable[float]) -> ConfigBuilder:
        """Restrict hues to the given degrees, each in [0, 360)."""
        return self._set(hues=tuple(float(h) for h in hues))

    def color_lightness(self, bounds: tuple[float | None, float | None]) -> ConfigBuilder:
        return self._set(color_lightness=normalize_bounds(bounds))

    def grayscale_lightness(self, bounds: tuple[float | None, float | None]) -> ConfigBuilder:
        return self._set(grayscale_lightness=normalize_bounds(bounds))

    def color_saturation(self, saturation: float) -> ConfigBuilder:
        return self._set(color_saturation=float(saturation))

    def grayscale_saturation(self, saturation: float) -> ConfigBuilder:
        return self._set(grayscale_saturation=float(saturation))

    def background_color(self, color: str | Iterable[int]) -> ConfigBuilder:
        """Pillow colour string or RGB/RGBA ints in [0, 255]; checked by ``build()``."""
        self._background = color
        return self

    def padding(self, padding: float) -> ConfigBuilder:
        return self._set(padding=float(padding))

    def size(self, size: int) -> ConfigBuilder:
        return self._set(size=size)

    def build(self) -> IdenticonConfig:
        """Validate and return the configuration.

        Checks run in a fixed order and the first failure is raised:
        hues, color lightness, grayscale lightness, color saturation,
        grayscale saturation, padding, size, background colour.
        """
        config = self._config
        if any(not 0.0 <= hue < 360.0 for hue in config.hues):
            raise ConfigError(ConfigErrorKind.INVALID_HUES)
        if not _valid_bounds(config.color_lightness):
            raise ConfigError(ConfigErrorKind.INVALID_COLOR_LIGHTNESS)
        if not _valid_bounds(config.grayscale_lightness):
            raise ConfigError(ConfigErrorKind.INVALID_GRAYSCALE_LIGHTNESS)
        if not 0.0 <= config.color_saturation <= 1.0:
            raise ConfigError(ConfigErrorKind.INVALID_COLOR_SATURATION)
        if not 0.0 <= config.grayscale_saturation <= 1.0:
            raise ConfigError(ConfigErrorKind.INVALID_GRAYSCALE_SATURATION)
        if not 0.0 <= config.padding <= 0.5:
            raise ConfigError(ConfigErrorKind.INVALID_PADDING)
        if isinstance(config.size, bool) or not isinstance(config.size, int) or config.size < 1:
            raise ConfigError(ConfigErrorKind.INVALID_SIZE)
        if self._background is not None:
            config = replace(config, background_color=to_rgba(self._background))
        return config
