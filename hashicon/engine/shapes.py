"""Shape library: the outer (side/corner) and center cell shapes.

Every function draws into the renderer's current cell. Sizes are integer
pixels; fractional factors truncate toward zero.
"""

from __future__ import annotations

from hashicon.engine.config import RGBA
from hashicon.engine.renderer import ShapeRenderer

OUTER_SHAPE_COUNT = 4
CENTER_SHAPE_COUNT = 14


def render_outer(
    renderer: ShapeRenderer,
    color: RGBA,
    background_color: RGBA,
    cell: int,
    selector: int,
    position: int,
) -> None:
    """Side and corner shapes. ``background_color`` and ``position`` are unused."""
    shape = selector % OUTER_SHAPE_COUNT
    if shape == 0:
        renderer.triangle(color, (0, 0), (cell, cell), 0)
    elif shape == 1:
        renderer.triangle(color, (0, cell // 2), (cell, cell // 2), 0)
    elif shape == 2:
        renderer.rhombus(color, (0, 0), (cell, cell))
    else:
        m = cell // 6
        renderer.circle(color, (m, m), cell - 2 * m)


def _border_square(renderer: ShapeRenderer, color: RGBA, cell: int) -> None:
    inner = cell / 10
    # Fixed outer borders in small icons so the border survives rounding.
    if cell < 6:
        outer = 1
    elif cell < 8:
        outer = 2
    else:
        outer = cell // 4
    inner_px = int(inner) if inner > 1 else 1
    p = cell - inner_px - outer
    renderer.rectangle(color, (outer, outer), (p, p))


def _square_with_square_cutout(renderer: ShapeRenderer, color: RGBA, background_color: RGBA, cell: int) -> None:
    inner = int(cell * 0.14)
    if cell < 4:
        outer = 1
    elif cell < 6:
        outer = 2
    else:
        outer = int(cell * 0.35)
    p = cell - outer - inner
    renderer.rectangle(color, (0, 0), (cell, cell))
    renderer.rectangle(background_color, (outer, outer), (p, p))


def render_center(
    renderer: ShapeRenderer,
    color: RGBA,
    background_color: RGBA,
    cell: int,
    selector: int,
    position: int,
) -> None:
    """Center shapes. Cut-outs are painted with ``background_color``.

    Shape 13 is a single large dot drawn only at ``position == 0``; the other
    three center cells stay empty for it.
    """
    shape = selector % CENTER_SHAPE_COUNT

    if shape == 0:
        k = int(cell * 0.42)
        renderer.polygon(
            color,
            [(0, 0), (cell, 0), (cell, cell - k * 2), (cell - k, cell), (0, cell)],
        )
    elif shape == 1:
        w = cell // 2
        h = int(cell * 0.8)
        renderer.triangle(color, (cell - w, 0), (w, h), 2)
    elif shape == 2:
        w = cell // 3
        renderer.rectangle(color, (w, w), (cell - w, cell - w))
    elif shape == 3:
        _border_square(renderer, color, cell)
    elif shape == 4:
        m = int(cell * 0.15)
        w = cell // 2
        p = cell - w - m
        renderer.circle(color, (p, p), w)
    elif shape == 5:
        inner = cell // 10
        outer = int(cell * 0.4)
        renderer.rectangle(color, (0, 0), (cell, cell))
        renderer.polygon(
            background_color,
            [
                (outer, outer),
                (cell - inner, outer),
                (outer + (cell - outer - inner) // 2, cell - inner),
            ],
        )
    elif shape == 6:
        tenth = cell // 10
        four = tenth * 4
        seven = tenth * 7
        renderer.polygon(
            color,
            [(0, 0), (cell, 0), (cell, seven), (four, four), (seven, cell), (0, cell)],
        )
    elif shape in (7, 11):
        half = cell // 2
        rest = cell - half
        renderer.triangle(color, (half, half), (rest, rest), 3)
    elif shape == 8:
        half = cell // 2
        rest = cell - half
        renderer.rectangle(color, (0, 0), (cell, rest))
        renderer.rectangle(color, (0, half), (rest, rest))
        renderer.triangle(color, (half, half), (rest, rest), 1)
    elif shape == 9:
        _square_with_square_cutout(renderer, color, background_color, cell)
    elif shape == 10:
        inner = cell * 0.12
        outer = int(inner * 3.0)
        renderer.rectangle(color, (0, 0), (cell, cell))
        renderer.circle(background_color, (outer, outer), cell - int(inner) - outer)
    elif shape == 12:
        m = cell // 4
        renderer.rectangle(color, (0, 0), (cell, cell))
        renderer.rectangle(background_color, (m, m), (cell - m, cell - m))
    elif shape == 13 and position == 0:
        m = int(cell * 0.4)
        w = int(cell * 1.2)
        renderer.circle(color, (m, m), w)
