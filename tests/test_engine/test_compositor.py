"""Tests for the top-level identicon compositor."""

from __future__ import annotations

import hashlib

import numpy as np
import pytest

from hashicon.engine.color import palette
from hashicon.engine.compositor import (
    CENTER_POSITIONS,
    CORNER_POSITIONS,
    SIDE_POSITIONS,
    compute_layout,
    generate_identicon,
    hue_from_nibbles,
    paint_identicon,
    render_identicon,
)
from hashicon.engine.config import IdenticonConfig
from hashicon.engine.nibbles import into_nibbles
from hashicon.engine.renderer import ShapeRenderer
from hashicon.utils.imaging import image_to_array
from tests.conftest import ALICE_HASH, FF_HASH, WHITE, ZERO_HASH, RecordingDraw


def test_positions_cover_grid_once():
    cells = set(SIDE_POSITIONS) | set(CORNER_POSITIONS) | set(CENTER_POSITIONS)
    assert len(SIDE_POSITIONS) == 8
    assert len(CORNER_POSITIONS) == 4
    assert len(CENTER_POSITIONS) == 4
    assert cells == {(x, y) for x in range(4) for y in range(4)}


@pytest.mark.parametrize(
    "size, padding, expected",
    [
        (256, 0.08, (20, 216, 54, 20)),
        (256, 0.0, (0, 256, 64, 0)),
        (100, 0.1, (10, 80, 20, 10)),
        (103, 0.0, (0, 103, 25, 1)),
        (256, 0.5, (128, 0, 0, 128)),
    ],
)
def test_layout(size, padding, expected):
    layout = compute_layout(IdenticonConfig(size=size, padding=padding))
    assert (layout.padding, layout.inner_size, layout.cell, layout.offset) == expected


def test_hue_range():
    assert hue_from_nibbles(into_nibbles(ZERO_HASH)) == 0.0
    assert hue_from_nibbles(into_nibbles(FF_HASH)) == 360.0


def test_render_is_deterministic():
    config = IdenticonConfig(size=128)
    first = render_identicon(ALICE_HASH, config)
    second = render_identicon(ALICE_HASH, config)
    assert first.tobytes() == second.tobytes()


def test_different_hashes_differ():
    a = generate_identicon("alice")
    b = generate_identicon("bob")
    assert a.tobytes() != b.tobytes()


def test_output_mode_and_size():
    image = render_identicon(ALICE_HASH, IdenticonConfig(size=77))
    assert image.mode == "RGBA"
    assert image.size == (77, 77)


def test_generate_hashes_with_sha1():
    expected = render_identicon(hashlib.sha1("ünïcode".encode("utf-8")).digest())
    assert generate_identicon("ünïcode").tobytes() == expected.tobytes()
    assert generate_identicon(b"alice").tobytes() == render_identicon(ALICE_HASH).tobytes()


def test_rejects_wrong_hash_length():
    with pytest.raises(ValueError):
        render_identicon(bytes(16))


def test_zero_hash_scenario():
    """All-zero hash: hue 0, roles (0, 1, 1), triangles outside, pentagons inside."""
    config = IdenticonConfig()
    candidates = palette(0.0, config)
    pixels = image_to_array(render_identicon(ZERO_HASH, config))

    assert pixels.shape == (256, 256, 4)
    # Padding stays background.
    assert tuple(pixels[5, 5]) == WHITE
    # Side cell (1, 0) at x=74..128, y=20..74: triangle covering the lower-left half.
    assert tuple(pixels[65, 79]) == candidates.dark_gray
    assert tuple(pixels[25, 119]) == WHITE
    # Corner cell (0, 0): same triangle in the corner role colour.
    assert tuple(pixels[65, 25]) == candidates.mid_color
    # Center cell (1, 1): clipped pentagon in the center role colour.
    assert tuple(pixels[84, 84]) == candidates.mid_color


def test_zero_hash_draws_expected_primitives():
    recording = RecordingDraw()
    config = IdenticonConfig()
    paint_identicon(ShapeRenderer(recording), ZERO_HASH, config)
    candidates = palette(0.0, config)

    assert len(recording.calls) == 16
    assert all(kind == "polygon" for kind, _, _ in recording.calls)
    colors = [fill for _, _, fill in recording.calls]
    assert colors[:8] == [candidates.dark_gray] * 8
    assert colors[8:] == [candidates.mid_color] * 8
    # First side cell at rotation 0.
    assert recording.calls[0][1] == [(128, 74), (74, 74), (74, 20)]


def test_selectors_and_rotation_per_group():
    """Nibbles 0 A 1 3 2 7: center shape 10, side shape 1 from rotation 3,
    corner shape 2 from rotation 7 (= 3); every group turns once per cell."""
    recording = RecordingDraw()
    config = IdenticonConfig()
    paint_identicon(ShapeRenderer(recording), bytes([0x0A, 0x13, 0x27]) + bytes(17), config)
    candidates = palette(0.0, config)

    # Side group: half-height triangle, rotations 3, 0, 1, 2, 3, 0, 1, 2.
    sides = recording.calls[:8]
    assert [kind for kind, _, _ in sides] == ["polygon"] * 8
    assert all(fill == candidates.dark_gray for _, _, fill in sides)
    assert [xy for _, xy, _ in sides] == [
        [(128, 20), (128, 74), (101, 74)],
        [(182, 74), (128, 74), (128, 47)],
        [(128, 236), (128, 182), (155, 182)],
        [(74, 182), (128, 182), (128, 209)],
        [(74, 74), (74, 128), (47, 128)],
        [(236, 128), (182, 128), (182, 101)],
        [(182, 182), (182, 128), (209, 128)],
        [(20, 128), (74, 128), (74, 155)],
    ]

    # Corner group: rhombus, rotations 3, 0, 1, 2.
    corners = recording.calls[8:12]
    assert all(fill == candidates.mid_color for _, _, fill in corners)
    assert [xy for _, xy, _ in corners] == [
        [(20, 47), (47, 20), (74, 47), (47, 74)],
        [(209, 20), (236, 47), (209, 74), (182, 47)],
        [(236, 209), (209, 236), (182, 209), (209, 182)],
        [(47, 236), (20, 209), (47, 182), (74, 209)],
    ]

    # Center group: square with a round cut-out, rotations 0, 1, 2, 3.
    centers = recording.calls[12:]
    assert centers == [
        ("rectangle", (74, 74, 127, 128), candidates.mid_color),
        ("ellipse", (93, 93, 122, 122), WHITE),
        ("rectangle", (128, 74, 181, 128), candidates.mid_color),
        ("ellipse", (134, 93, 163, 122), WHITE),
        ("rectangle", (128, 128, 181, 182), candidates.mid_color),
        ("ellipse", (134, 134, 163, 163), WHITE),
        ("rectangle", (74, 128, 127, 182), candidates.mid_color),
        ("ellipse", (93, 134, 122, 163), WHITE),
    ]


def test_full_padding_leaves_background_only():
    config = IdenticonConfig(size=64, padding=0.5, background_color=(10, 20, 30, 255))
    recording = RecordingDraw()
    paint_identicon(ShapeRenderer(recording), ALICE_HASH, config)
    assert recording.calls == []

    pixels = image_to_array(render_identicon(ALICE_HASH, config))
    assert (pixels == np.array([10, 20, 30, 255], dtype=np.uint8)).all()


def test_zero_padding_grid_touches_edges():
    config = IdenticonConfig(size=256, padding=0.0)
    layout = compute_layout(config)
    assert layout.offset == 0
    assert layout.offset + 4 * layout.cell == config.size

    pixels = image_to_array(render_identicon(ZERO_HASH, config))
    # Corner cell (0, 0) triangle runs down the left edge.
    assert tuple(pixels[40, 2]) != WHITE


@pytest.mark.parametrize("size", [16, 64, 257])
@pytest.mark.parametrize("padding", [0.0, 0.08, 0.25])
def test_primitives_stay_on_canvas(size, padding):
    config = IdenticonConfig(size=size, padding=padding)
    for i in range(60):
        recording = RecordingDraw()
        paint_identicon(ShapeRenderer(recording), hashlib.sha1(str(i).encode()).digest(), config)
        for x, y in recording.coordinates():
            assert 0 <= x <= size
            assert 0 <= y <= size


def test_tiny_canvas_does_not_fail():
    for size in range(1, 12):
        config = IdenticonConfig(size=size, padding=0.0)
        for i in range(20):
            render_identicon(hashlib.sha1(str(i).encode()).digest(), config)


def test_transparent_background():
    config = IdenticonConfig(size=64, background_color=(0, 0, 0, 0))
    pixels = image_to_array(render_identicon(ALICE_HASH, config))
    assert pixels[0, 0, 3] == 0
    assert (pixels[..., 3] == 255).any()
