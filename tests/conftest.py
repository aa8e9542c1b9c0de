"""Shared test fixtures."""

from __future__ import annotations

import hashlib

import pytest

from hashicon.engine.renderer import ShapeRenderer

ZERO_HASH = bytes(20)
FF_HASH = b"\xff" * 20
ALICE_HASH = hashlib.sha1(b"alice").digest()

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


class RecordingDraw:
    """Stands in for PIL.ImageDraw.ImageDraw and records every primitive."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object, object]] = []

    def polygon(self, xy, fill=None, outline=None, width=1) -> None:
        self.calls.append(("polygon", list(xy), fill))

    def ellipse(self, xy, fill=None, outline=None, width=1) -> None:
        self.calls.append(("ellipse", tuple(xy), fill))

    def rectangle(self, xy, fill=None, outline=None, width=1) -> None:
        self.calls.append(("rectangle", tuple(xy), fill))

    def coordinates(self) -> list[tuple[int, int]]:
        points: list[tuple[int, int]] = []
        for kind, xy, _ in self.calls:
            if kind == "polygon":
                points.extend(xy)  # type: ignore[arg-type]
            else:
                x0, y0, x1, y1 = xy  # type: ignore[misc]
                points.extend([(x0, y0), (x1, y1)])
        return points


@pytest.fixture
def recording() -> RecordingDraw:
    return RecordingDraw()


@pytest.fixture
def renderer(recording: RecordingDraw) -> ShapeRenderer:
    return ShapeRenderer(recording)
