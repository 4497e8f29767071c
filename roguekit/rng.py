"""A seedable xorshift random number generator with dice helpers."""

from __future__ import annotations

import os
import struct

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_PCG_MUL = 6364136223846793005
_PCG_INC = 11634580027462260723
_ZERO_SEED_WORD = 0x0BAD5EED


class RandomNumberGenerator:
    """Xorshift128 generator; seeded from the OS when no seed is given."""

    def __init__(self, seed_bytes: bytes | None = None) -> None:
        if seed_bytes is None:
            seed_bytes = os.urandom(16)
        if len(seed_bytes) != 16:
            raise ValueError("seed must be exactly 16 bytes")
        words = struct.unpack("<4I", bytes(seed_bytes))
        if not any(words):
            words = (_ZERO_SEED_WORD,) * 4
        self._x, self._y, self._z, self._w = words

    @classmethod
    def seeded(cls, seed: int) -> RandomNumberGenerator:
        """Create a generator whose sequence is fixed by a 64-bit seed."""
        state = seed & _U64
        chunks = []
        for _ in range(4):
            state = (state * _PCG_MUL + _PCG_INC) & _U64
            xorshifted = (((state >> 18) ^ state) >> 27) & _U32
            rot = state >> 59
            value = ((xorshifted >> rot) | (xorshifted << ((32 - rot) % 32))) & _U32
            chunks.append(struct.pack("<I", value))
        return cls(b"".join(chunks))

    def next_u32(self) -> int:
        """Return the next unsigned 32-bit value."""
        x = self._x
        t = (x ^ (x << 11)) & _U32
        self._x, self._y, self._z = self._y, self._z, self._w
        w = self._w
        self._w = (w ^ (w >> 19) ^ (t ^ (t >> 8))) & _U32
        return self._w

    def next_u64(self) -> int:
        """Return the next unsigned 64-bit value."""
        low = self.next_u32()
        high = self.next_u32()
        return (high << 32) | low

    def rand(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def range(self, low, high):
        """Return a value in [low, high); floats if either bound is a float."""
        if isinstance(low, float) or isinstance(high, float):
            if not low < high:
                raise ValueError(f"empty range [{low}, {high})")
            while True:
                value = low + (high - low) * self.rand()
                if value < high:
                    return value
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        span = high - low
        if span <= 1 << 32:
            bits, draw = 32, self.next_u32
        elif span <= 1 << 64:
            bits, draw = 64, self.next_u64
        else:
            raise ValueError("range is wider than 64 bits")
        if span == 1 << bits:
            return low + draw()
        mask = (1 << bits) - 1
        zone = ((span << (bits - span.bit_length())) & mask) - 1
        while True:
            product = draw() * span
            if product & mask <= zone:
                return low + (product >> bits)

    def roll_dice(self, n: int, die_type: int) -> int:
        """Roll ``n`` dice with ``die_type`` sides each and return the total."""
        return sum(self.range(1, die_type + 1) for _ in range(n))