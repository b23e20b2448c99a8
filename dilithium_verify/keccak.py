"""The Keccak-f[1600] permutation on a state of 25 64-bit lanes."""

from __future__ import annotations

from typing import Sequence

__all__ = ["ROUNDS", "ROUND_CONSTANTS", "ROTATION_OFFSETS", "keccak_f1600"]

ROUNDS = 24
_MASK64 = (1 << 64) - 1


def _rc_bit(t: int) -> int:
    """Output bit of the round-constant LFSR after ``t`` steps."""
    t %= 255
    if t == 0:
        return 1
    reg = 1
    for _ in range(t):
        reg <<= 1
        if reg & 0x100:
            reg ^= 0x171
    return reg & 1


def _round_constant(round_index: int) -> int:
    return sum(
        _rc_bit(j + 7 * round_index) << ((1 << j) - 1) for j in range(7)
    )


ROUND_CONSTANTS: tuple[int, ...] = tuple(_round_constant(i) for i in range(ROUNDS))

# Rotation offsets indexed as ROTATION_OFFSETS[x][y].
ROTATION_OFFSETS: tuple[tuple[int, ...], ...] = (
    (0, 36, 3, 41, 18),
    (1, 44, 10, 45, 2),
    (62, 6, 43, 15, 61),
    (28, 55, 25, 21, 56),
    (27, 20, 39, 8, 14),
)


def _rol(value: int, offset: int) -> int:
    offset %= 64
    if offset == 0:
        return value
    return ((value << offset) | (value >> (64 - offset))) & _MASK64


def keccak_f1600(state: Sequence[int]) -> list[int]:
    """Apply the 24-round Keccak-f[1600] permutation.

    ``state`` holds 25 lanes, lane ``(x, y)`` at index ``x + 5*y``.
    A new list of lanes is returned; the input is left untouched.
    """
    if len(state) != 25:
        raise ValueError(f"Keccak state must have 25 lanes, got {len(state)}")
    lanes = [int(v) & _MASK64 for v in state]

    for rc in ROUND_CONSTANTS:
        # theta
        columns = [
            lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
            for x in range(5)
        ]
        deltas = [
            columns[(x - 1) % 5] ^ _rol(columns[(x + 1) % 5], 1) for x in range(5)
        ]
        lanes = [lane ^ deltas[i % 5] for i, lane in enumerate(lanes)]

        # rho and pi
        moved = [0] * 25
        for x in range(5):
            for y in range(5):
                moved[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(
                    lanes[x + 5 * y], ROTATION_OFFSETS[x][y]
                )

        # chi
        lanes = [
            moved[x + 5 * y]
            ^ ((~moved[(x + 1) % 5 + 5 * y] & _MASK64) & moved[(x + 2) % 5 + 5 * y])
            for y in range(5)
            for x in range(5)
        ]

        # iota
        lanes[0] ^= rc

    return lanes