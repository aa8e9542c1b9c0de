"""Shape renderer: cell-local primitives routed through the current CellTransform.

Drawing goes to anything exposing the ``PIL.ImageDraw.ImageDraw`` methods
``polygon``, ``ellipse`` and ``rectangle``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from hashicon.engine.config import RGBA
from hashicon.engine.transform import CellTransform, Point


class DrawTarget(Protocol):
    def polygon(self, xy, fill=None, outline=None, width=1) -> None: ...

    def ellipse(self, xy, fill=None, outline=None, width=1) -> None: ...

    def rectangle(self, xy, fill=None, outline=None, width=1) -> None: ...


class ShapeRenderer:
    """Draws primitives for one cell at a time.

    Set ``transform`` before drawing each cell; every coordinate passed to a
    primitive is relative to that cell's top-left corner.
    """

    def __init__(self, draw: DrawTarget) -> None:
        self.draw = draw
        self.transform = CellTransform()

    def polygon(self, color: RGBA, points: Iterable[Point]) -> None:
        vertices = [self.transform.apply(p) for p in points]
        self.draw.polygon(vertices, fill=color)

    def circle(self, color: RGBA, top_left: Point, diameter: int) -> None:
        """Fill the circle inscribed in a ``diameter``-sized box at ``top_left``."""
        x, y = self.transform.apply(top_left, (diameter, diameter))
        self.draw.ellipse((x, y, x + diameter, y + diameter), fill=color)

    def rectangle(self, color: RGBA, top_left: Point, size: Point) -> None:
        x, y = self.transform.apply(top_left, size)
        w, h = size
        if self.transform.is_odd:
            w, h = h, w
        # Pillow rejects inverted boxes; tiny cells can produce them.
        if w <= 0 or h < 0:
            return
        # One extra row hides the seam left by rounding between adjacent cells.
        self.draw.rectangle((x, y, x + w - 1, y + h), fill=color)

    def rhombus(self, color: RGBA, top_left: Point, size: Point) -> None:
        x, y = top_left
        w, h = size
        self.polygon(
            color,
            [
                (x + w // 2, y),
                (x + w, y + h // 2),
                (x + w // 2, y + h),
                (x, y + h // 2),
            ],
        )

    def triangle(self, color: RGBA, top_left: Point, size: Point, orientation: int = 0) -> None:
        """Right triangle covering half of the box.

        ``orientation % 4`` picks the omitted corner: 0 top-right,
        1 bottom-right, 2 bottom-left, 3 top-left.
        """
        x, y = top_left
        w, h = size
        corners = [(x + w, y), (x + w, y + h), (x, y + h), (x, y)]
        del corners[orientation % 4]
        self.polygon(color, corners)
