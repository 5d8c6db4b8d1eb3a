"""Classic generators used as baselines next to SHISHUA.

Every generator is seeded with four 64-bit words. Word outputs are written
as little-endian 64-bit integers. Request sizes must be whole multiples of
the generator's block size, except for RC4, which works byte by byte.
"""

import struct
from typing import List, Sequence, Tuple

from .shishua import _check_seed, _check_size

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1

_ROMU_MULTIPLIER = 15241094284759029579
_WYRAND_INCREMENT = 0xA0761D6478BD642F
_WYRAND_XOR = 0xE7037ED1A0B428DB
_LEHMER_MULTIPLIER = 0xDA942042E4DD58B5

_XOSHIRO_LANES = 8


def _rotl(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (64 - amount))) & _MASK64


def _pack(words: List[int]) -> bytes:
    return struct.pack(f"<{len(words)}Q", *words)


def _xoshiro_step(s: Tuple[int, int, int, int]) -> Tuple[int, Tuple[int, int, int, int]]:
    """Return one xoshiro256+ output and the state that follows it."""
    s0, s1, s2, s3 = s
    out = (s0 + s3) & _MASK64
    t = (s1 << 17) & _MASK64
    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3
    s2 ^= t
    s3 = _rotl(s3, 45)
    return out, (s0, s1, s2, s3)


class Romu:
    """RomuTrio: three words of state, 8 bytes per step."""

    BLOCK = 8

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        x, y, z, _ = _check_seed(seed)
        self.state = (x, y, z or 1)

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 8."""
        x, y, z = self.state
        words = []
        for _ in range(_check_size(size, self.BLOCK)):
            words.append(x)
            x, y, z = (
                (_ROMU_MULTIPLIER * z) & _MASK64,
                _rotl((y - x) & _MASK64, 12),
                _rotl((z - y) & _MASK64, 44),
            )
        self.state = (x, y, z)
        return _pack(words)


class RC4:
    """RC4 keystream keyed with the 32 bytes of the seed."""

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        key = struct.pack("<4Q", *_check_seed(seed))
        shuffle = bytearray(range(256))
        j = 0
        for i in range(256):
            shuffle[i], shuffle[j] = shuffle[j], shuffle[i]
            if i + 1 < 256:
                j = (j + shuffle[i + 1] + key[(i + 1) % 32]) & 0xFF
        self.shuffle = shuffle
        self.i = 0
        self.j = 0

    def generate(self, size: int) -> bytes:
        """Return ``size`` keystream bytes."""
        if size < 0:
            raise ValueError("size must not be negative")
        shuffle = self.shuffle
        i, j = self.i, self.j
        out = bytearray(size)
        for k in range(size):
            i = (i + 1) & 0xFF
            j = (j + shuffle[i]) & 0xFF
            shuffle[i], shuffle[j] = shuffle[j], shuffle[i]
            out[k] = shuffle[(shuffle[i] + shuffle[j]) & 0xFF]
        self.i, self.j = i, j
        return bytes(out)


class WyRand:
    """wyrand: a 64-bit counter hashed by a folded 128-bit multiply."""

    BLOCK = 8

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        self.counter = _check_seed(seed)[0]

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 8."""
        counter = self.counter
        words = []
        for _ in range(_check_size(size, self.BLOCK)):
            counter = (counter + _WYRAND_INCREMENT) & _MASK64
            product = (counter ^ _WYRAND_XOR) * counter
            words.append((product ^ (product >> 64)) & _MASK64)
        self.counter = counter
        return _pack(words)


class Xoshiro256Plus:
    """xoshiro256+ with one 4-word state, 8 bytes per step."""

    BLOCK = 8

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        s0, s1, s2, s3 = _check_seed(seed)
        # At least one bit must be set in the state.
        self.state = (s0 or 1, s1, s2, s3)

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 8."""
        state = self.state
        words = []
        for _ in range(_check_size(size, self.BLOCK)):
            out, state = _xoshiro_step(state)
            words.append(out)
        self.state = state
        return _pack(words)


class Xoshiro256PlusX8:
    """Eight interleaved xoshiro256+ lanes, 64 bytes per step."""

    BLOCK = 8 * _XOSHIRO_LANES

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        seed = _check_seed(seed)
        self.lanes = [
            tuple(word ^ (1 << lane) for word in seed)
            for lane in range(_XOSHIRO_LANES)
        ]

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 64."""
        words = []
        for _ in range(_check_size(size, self.BLOCK)):
            stepped = [_xoshiro_step(lane) for lane in self.lanes]
            words.extend(out for out, _ in stepped)
            self.lanes = [state for _, state in stepped]
        return _pack(words)


class Lehmer128:
    """Lehmer generator on a 128-bit state, emitting the high 64 bits."""

    BLOCK = 8

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        s0, s1, s2, s3 = _check_seed(seed)
        state = ((s0 ^ s2) << 64) ^ (s1 ^ s3)
        self.state = state or 1

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 8."""
        state = self.state
        words = []
        for _ in range(_check_size(size, self.BLOCK)):
            state = (state * _LEHMER_MULTIPLIER) & _MASK128
            words.append(state >> 64)
        self.state = state
        return _pack(words)