"""Per-cell affine placement: shape-local coordinates to canvas pixels."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[int, int]


@dataclass(frozen=True)
class CellTransform:
    """Placement of one grid cell: origin, size and a quarter-turn count.

    Rotations 1-3 mirror through ``right``/``bottom`` so a shape defined once
    in cell-local coordinates can be drawn in four orientations.
    """

    x: int = 0
    y: int = 0
    size: int = 0
    rotation: int = 0
    right: int = field(init=False)
    bottom: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation", self.rotation % 4)
        object.__setattr__(self, "right", self.x + self.size)
        object.__setattr__(self, "bottom", self.y + self.size)

    @property
    def is_odd(self) -> bool:
        """True for 90 and 270 degree turns, where width and height swap."""
        return self.rotation & 1 == 1

    def apply(self, point: Point, box: Point = (0, 0)) -> Point:
        """Map ``point`` (top-left of a ``box`` of (w, h)) into canvas space."""
        px, py = point
        w, h = box
        if self.rotation == 0:
            return (self.x + px, self.y + py)
        if self.rotation == 1:
            return (self.right - py - h, self.y + px)
        if self.rotation == 2:
            return (self.right - px - w, self.bottom - py - h)
        return (self.x + py, self.bottom - px - w)
