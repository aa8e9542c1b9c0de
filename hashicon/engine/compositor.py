"""Compositor: lays out the 4x4 grid and draws the three position groups.

Usage:
    image = render_identicon(hashlib.sha1(b"alice").digest(), config)
    image = generate_identicon("alice")
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from PIL import Image, ImageDraw

from hashicon.engine.color import palette, round_half_away
from hashicon.engine.config import DEFAULT_CONFIG, RGBA, IdenticonConfig
from hashicon.engine.nibbles import (
    CENTER_SHAPE_NIBBLE,
    CORNER_ROTATION_NIBBLE,
    CORNER_SHAPE_NIBBLE,
    HUE_SEED_MAX,
    SIDE_ROTATION_NIBBLE,
    SIDE_SHAPE_NIBBLE,
    HashNibbles,
    into_nibbles,
)
from hashicon.engine.renderer import ShapeRenderer
from hashicon.engine.roles import ColorRoles, select_color_roles
from hashicon.engine.shapes import render_center, render_outer
from hashicon.engine.transform import CellTransform, Point

logger = logging.getLogger(__name__)

GRID_CELLS = 4

# Grid coordinates per group, in drawing order. Rotation advances by one
# quarter turn per entry.
SIDE_POSITIONS: tuple[Point, ...] = ((1, 0), (2, 0), (2, 3), (1, 3), (0, 1), (3, 1), (3, 2), (0, 2))
CORNER_POSITIONS: tuple[Point, ...] = ((0, 0), (3, 0), (3, 3), (0, 3))
CENTER_POSITIONS: tuple[Point, ...] = ((1, 1), (2, 1), (2, 2), (1, 2))

ShapeFn = Callable[[ShapeRenderer, RGBA, RGBA, int, int, int], None]


@dataclass(frozen=True)
class GridLayout:
    padding: int
    inner_size: int
    cell: int
    offset: int


def compute_layout(config: IdenticonConfig) -> GridLayout:
    """Cell size and grid offset that centre the 4x4 grid inside the padding."""
    padding = round_half_away(config.padding * config.size)
    inner = config.size - padding * 2
    cell = inner // GRID_CELLS
    offset = padding + inner // 2 - cell * 2
    return GridLayout(padding=padding, inner_size=inner, cell=cell, offset=offset)


def hue_from_nibbles(nibbles: HashNibbles) -> float:
    """Hue in degrees from the 28-bit seed; the maximum seed maps to 360."""
    return 360.0 * nibbles.hue_seed() / HUE_SEED_MAX


def render_group(
    renderer: ShapeRenderer,
    positions: Sequence[Point],
    shape_fn: ShapeFn,
    color: RGBA,
    background_color: RGBA,
    layout: GridLayout,
    selector: int,
    rotation: int = 0,
) -> None:
    """Draw one position group, starting at ``rotation`` and turning once per cell."""
    for index, (col, row) in enumerate(positions):
        renderer.transform = CellTransform(
            layout.offset + col * layout.cell,
            layout.offset + row * layout.cell,
            layout.cell,
            rotation % 4,
        )
        rotation += 1
        shape_fn(renderer, color, background_color, layout.cell, selector, index)


def paint_identicon(renderer: ShapeRenderer, hash_bytes: bytes, config: IdenticonConfig) -> None:
    """Draw the identicon for ``hash_bytes`` through an existing renderer."""
    nibbles = into_nibbles(hash_bytes)
    layout = compute_layout(config)
    if layout.cell <= 0:
        logger.debug("Identicon grid is empty (size=%d, padding=%d); nothing drawn", config.size, layout.padding)
        return

    hue = hue_from_nibbles(nibbles)
    candidates = palette(hue, config)
    indices = select_color_roles(nibbles.role_selectors())
    roles = ColorRoles.from_indices(candidates, indices)
    logger.debug(
        "Identicon hue=%.2f roles=%s cell=%d offset=%d",
        hue,
        indices,
        layout.cell,
        layout.offset,
    )

    background = config.background_color
    render_group(
        renderer,
        SIDE_POSITIONS,
        render_outer,
        roles.side,
        background,
        layout,
        nibbles[SIDE_SHAPE_NIBBLE],
        nibbles[SIDE_ROTATION_NIBBLE],
    )
    render_group(
        renderer,
        CORNER_POSITIONS,
        render_outer,
        roles.corner,
        background,
        layout,
        nibbles[CORNER_SHAPE_NIBBLE],
        nibbles[CORNER_ROTATION_NIBBLE],
    )
    render_group(
        renderer,
        CENTER_POSITIONS,
        render_center,
        roles.center,
        background,
        layout,
        nibbles[CENTER_SHAPE_NIBBLE],
    )


def render_identicon(hash_bytes: bytes, config: IdenticonConfig | None = None) -> Image.Image:
    """Render the identicon for a 20-byte hash.

    Pad or truncate other digests to 20 bytes before calling. The result is
    a fresh ``RGBA`` Pillow image of ``config.size`` square; see
    ``hashicon.utils.imaging`` for encoding and saving.
    """
    config = config or DEFAULT_CONFIG
    image = Image.new("RGBA", (config.size, config.size), config.background_color)
    paint_identicon(ShapeRenderer(ImageDraw.Draw(image)), hash_bytes, config)
    return image


def message_digest(message: str | bytes) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else message
    return hashlib.sha1(data).digest()


def generate_identicon(message: str | bytes, config: IdenticonConfig | None = None) -> Image.Image:
    """Render the identicon for an arbitrary message such as a username.

    The message is hashed with SHA-1, which is not collision resistant. Pass
    your own 20-byte digest to ``render_identicon`` if that matters.
    """
    return render_identicon(message_digest(message), config)
