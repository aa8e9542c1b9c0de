"""Hash decoding: 20-byte digest to 40 nibbles, plus fixed-offset field reads."""

from __future__ import annotations

from collections.abc import Sequence

HASH_LENGTH = 20
NIBBLE_COUNT = HASH_LENGTH * 2

# Field offsets (nibble indices) read by the compositor.
CENTER_SHAPE_NIBBLE = 1
SIDE_SHAPE_NIBBLE = 2
SIDE_ROTATION_NIBBLE = 3
CORNER_SHAPE_NIBBLE = 4
CORNER_ROTATION_NIBBLE = 5
ROLE_SELECTOR_NIBBLES = (8, 9, 10)

# Hue seed: 7 nibbles from offset 33, i.e. the last 28 bits of the hash.
HUE_SEED_OFFSET = 33
HUE_SEED_LENGTH = 7
HUE_SEED_MAX = (1 << (HUE_SEED_LENGTH * 4)) - 1


class HashNibbles(Sequence):
    """Immutable view of a hash as 40 half-bytes, high nibble first."""

    __slots__ = ("_nibbles",)

    def __init__(self, nibbles: Sequence[int]) -> None:
        if len(nibbles) != NIBBLE_COUNT:
            raise ValueError(f"Expected {NIBBLE_COUNT} nibbles, got {len(nibbles)}")
        self._nibbles = tuple(nibbles)

    def __getitem__(self, index):  # type: ignore[override]
        return self._nibbles[index]

    def __len__(self) -> int:
        return NIBBLE_COUNT

    def __repr__(self) -> str:
        return f"HashNibbles({''.join(f'{n:x}' for n in self._nibbles)})"

    def value(self, start: int, length: int) -> int:
        """Join ``length`` nibbles from ``start`` into a big-endian unsigned int.

        Shorter runs are right-aligned, so ``value(33, 7)`` behaves like a
        32-bit read whose top nibble is zero.
        """
        if length < 1 or start < 0 or start + length > NIBBLE_COUNT:
            raise IndexError(f"Nibble range [{start}, {start + length}) outside [0, {NIBBLE_COUNT})")
        result = 0
        for nibble in self._nibbles[start : start + length]:
            result = (result << 4) | nibble
        return result

    def hue_seed(self) -> int:
        return self.value(HUE_SEED_OFFSET, HUE_SEED_LENGTH)

    def role_selectors(self) -> tuple[int, int, int]:
        a, b, c = (self._nibbles[i] for i in ROLE_SELECTOR_NIBBLES)
        return (a, b, c)


def into_nibbles(hash_bytes: bytes) -> HashNibbles:
    """Expand a 20-byte hash into nibbles (high then low, in byte order)."""
    if len(hash_bytes) != HASH_LENGTH:
        raise ValueError(f"Hash must be exactly {HASH_LENGTH} bytes, got {len(hash_bytes)}")
    nibbles: list[int] = []
    for byte in hash_bytes:
        nibbles.append(byte >> 4)
        nibbles.append(byte & 0x0F)
    return HashNibbles(nibbles)
