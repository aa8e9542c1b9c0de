"""Colour-role selection: pick palette indices for the side, corner and center groups."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from hashicon.engine.color import ColorCandidates
from hashicon.engine.config import RGBA

PALETTE_SIZE = 5
FALLBACK_INDEX = 1

# Palette slots that look too alike to appear in two roles: the two darks
# (dark gray, dark color) and the two lights (light gray, light color).
_AVOID_GROUPS = (frozenset({0, 4}), frozenset({2, 3}))


def select_color_roles(selectors: Iterable[int]) -> tuple[int, int, int]:
    """Map three raw selectors (side, corner, center) to palette indices.

    Each selector is reduced mod 5. An index whose group already appears among
    the previously assigned roles is replaced by the mid colour (1). Only
    earlier roles are inspected, so the order side, corner, center matters and
    index 1 may be chosen more than once.
    """
    selected: list[int] = []
    for selector in selectors:
        index = selector % PALETTE_SIZE
        for group in _AVOID_GROUPS:
            if index in group and any(prev in group for prev in selected):
                index = FALLBACK_INDEX
                break
        selected.append(index)

    if len(selected) != 3:
        raise ValueError(f"Expected 3 role selectors, got {len(selected)}")
    return (selected[0], selected[1], selected[2])


class ColorRoles(NamedTuple):
    side: RGBA
    corner: RGBA
    center: RGBA

    @classmethod
    def from_indices(cls, candidates: ColorCandidates, indices: tuple[int, int, int]) -> ColorRoles:
        side, corner, center = indices
        return cls(candidates[side], candidates[corner], candidates[center])
