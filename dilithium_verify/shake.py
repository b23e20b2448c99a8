"""SHAKE128/SHAKE256 extendable-output functions built on Keccak-f[1600]."""

from __future__ import annotations

from .keccak import keccak_f1600
from .params import SEEDBYTES

__all__ = [
    "SHAKE128_RATE",
    "SHAKE256_RATE",
    "SHA3_256_RATE",
    "SHA3_512_RATE",
    "STREAM128_BLOCKBYTES",
    "STREAM256_BLOCKBYTES",
    "Shake",
    "shake128",
    "shake256_xof",
    "shake256",
    "stream128",
]

SHAKE128_RATE = 168
SHAKE256_RATE = 136
SHA3_256_RATE = 136
SHA3_512_RATE = 72

STREAM128_BLOCKBYTES = SHAKE128_RATE
STREAM256_BLOCKBYTES = SHAKE256_RATE

_SHAKE_DOMAIN = 0x1F


class Shake:
    """Incremental SHAKE sponge: absorb, finalize, then squeeze."""

    def __init__(self, rate: int) -> None:
        if rate <= 0 or rate >= 200 or rate % 8:
            raise ValueError(f"invalid sponge rate: {rate}")
        self.rate = rate
        self._lanes = [0] * 25
        self._pos = 0
        self._finalized = False

    def _permute(self) -> None:
        self._lanes = keccak_f1600(self._lanes)

    def _rate_bytes(self) -> bytes:
        return b"".join(
            lane.to_bytes(8, "little") for lane in self._lanes[: self.rate // 8]
        )

    def absorb(self, data: bytes) -> "Shake":
        """Absorb more input; may be called any number of times before finalize."""
        if self._finalized:
            raise RuntimeError("cannot absorb after finalize")
        for byte in bytes(data):
            self._lanes[self._pos // 8] ^= byte << (8 * (self._pos % 8))
            self._pos += 1
            if self._pos == self.rate:
                self._permute()
                self._pos = 0
        return self

    def finalize(self) -> "Shake":
        """Apply the SHAKE padding and switch the sponge to squeezing."""
        if self._finalized:
            raise RuntimeError("sponge already finalized")
        self._lanes[self._pos // 8] ^= _SHAKE_DOMAIN << (8 * (self._pos % 8))
        self._lanes[self.rate // 8 - 1] ^= 1 << 63
        self._pos = self.rate
        self._finalized = True
        return self

    def squeeze(self, outlen: int) -> bytes:
        """Squeeze ``outlen`` bytes, continuing where the last squeeze stopped."""
        if not self._finalized:
            raise RuntimeError("cannot squeeze before finalize")
        if outlen < 0:
            raise ValueError("output length must not be negative")
        out = bytearray()
        while len(out) < outlen:
            if self._pos == self.rate:
                self._permute()
                self._pos = 0
            take = min(self.rate - self._pos, outlen - len(out))
            out += self._rate_bytes()[self._pos : self._pos + take]
            self._pos += take
        return bytes(out)

    def squeeze_blocks(self, nblocks: int) -> bytes:
        """Squeeze ``nblocks`` whole blocks of ``rate`` bytes each."""
        if not self._finalized:
            raise RuntimeError("cannot squeeze before finalize")
        if nblocks < 0:
            raise ValueError("block count must not be negative")
        out = bytearray()
        for _ in range(nblocks):
            self._permute()
            out += self._rate_bytes()
        return bytes(out)


def shake128() -> Shake:
    """A fresh SHAKE128 sponge."""
    return Shake(SHAKE128_RATE)


def shake256_xof() -> Shake:
    """A fresh SHAKE256 sponge."""
    return Shake(SHAKE256_RATE)


def shake256(data: bytes, outlen: int) -> bytes:
    """One-shot SHAKE256 of ``data`` producing ``outlen`` bytes."""
    xof = shake256_xof().absorb(data).finalize()
    nblocks = outlen // SHAKE256_RATE
    head = xof.squeeze_blocks(nblocks)
    return head + xof.squeeze(outlen - nblocks * SHAKE256_RATE)


def stream128(seed: bytes, nonce: int) -> Shake:
    """SHAKE128 sponge over ``seed`` followed by the 16-bit little-endian nonce."""
    seed = bytes(seed)
    if len(seed) != SEEDBYTES:
        raise ValueError(f"seed must be {SEEDBYTES} bytes, got {len(seed)}")
    if not 0 <= nonce <= 0xFFFF:
        raise ValueError(f"nonce out of 16-bit range: {nonce}")
    xof = shake128()
    xof.absorb(seed)
    xof.absorb(nonce.to_bytes(2, "little"))
    return xof.finalize()