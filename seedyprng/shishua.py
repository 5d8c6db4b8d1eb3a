"""SHISHUA generators and the SS64 wrapper that seeds one from a feeder.

Both generators emit their current output lane and then advance. Outputs
are written as little-endian 64-bit words. Request sizes must be whole
multiples of the generator's block size.
"""

import struct
from typing import Callable, List, Sequence, Tuple

_MASK64 = (1 << 64) - 1

# Hex digits of the golden ratio: nothing up the sleeve.
PHI = (
    0x9E3779B97F4A7C15, 0xF39CC0605CEDC834, 0x1082276BF3A27251, 0xF86C6A11D0C18E95,
    0x2767F0B153D27B7F, 0x0347045B5BF1827F, 0x01886F0928403002, 0xC1D64BA40F335E36,
    0xF06AD7AE9717877E, 0x85839D6EFFBD7DC6, 0x64D325D1C5371682, 0xCADD0CCCFDFFBBE1,
    0x626E33B8D04B4331, 0xBBF73C790D94F79D, 0x471C4AB3ED3D82A5, 0xFEC507705E4AE6E5,
)

# Word offsets of the 96/160-bit rotations: low halves, then high halves.
_SHUFFLE_LO = (2, 3, 0, 1, 5, 6, 7, 4)
_SHUFFLE_HI = (3, 0, 1, 2, 6, 7, 4, 5)

Feeder = Callable[[int], bytes]


def _check_seed(seed: Sequence[int]) -> Tuple[int, ...]:
    values = tuple(seed)
    if len(values) != 4:
        raise ValueError(f"seed must hold 4 words, got {len(values)}")
    if any(not 0 <= word <= _MASK64 for word in values):
        raise ValueError("seed words must fit in 64 unsigned bits")
    return values


def _check_size(size: int, block: int) -> int:
    if size < 0:
        raise ValueError("size must not be negative")
    if size % block:
        raise ValueError(f"size must be a multiple of {block} bytes")
    return size // block


def _shuffle(s: List[int]) -> List[int]:
    return [
        ((s[lo] >> 32) | (s[hi] << 32)) & _MASK64
        for lo, hi in zip(_SHUFFLE_LO, _SHUFFLE_HI)
    ]


def _mix(s: List[int], counter: List[int]) -> List[int]:
    """Advance one 8-word lane pair in place; return its 4 output words."""
    for k, inc in enumerate(counter):
        s[k + 4] = (s[k + 4] + inc) & _MASK64
    t = _shuffle(s)
    out = []
    for k in range(4):
        u_lo = s[k] >> 1
        u_hi = s[k + 4] >> 3
        s[k] = (u_lo + t[k]) & _MASK64
        s[k + 4] = (u_hi + t[k + 4]) & _MASK64
        out.append(u_lo ^ t[k + 4])
    return out


def _bump(counter: List[int]) -> List[int]:
    return [(c + 7 - 2 * j) & _MASK64 for j, c in enumerate(counter)]


class Shishua:
    """Full SHISHUA: 16 words of state, 128 bytes per step."""

    BLOCK = 128
    _ROUNDS = 13

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        seed = _check_seed(seed)
        self.state = list(PHI)
        self.output = [0] * 16
        self.counter = [0] * 4
        for i, word in enumerate(seed):
            self.state[2 * i] ^= word
            self.state[2 * i + 8] ^= seed[(i + 2) % 4]
        for _ in range(self._ROUNDS):
            self._step()
            o = self.output
            self.state = o[12:16] + o[8:12] + o[4:8] + o[0:4]

    def _step(self) -> None:
        low = self.state[:8]
        high = self.state[8:]
        out_low = _mix(low, self.counter)
        out_high = _mix(high, self.counter)
        self.state = low + high
        s = self.state
        self.output = (
            out_low
            + out_high
            + [s[j] ^ s[j + 12] for j in range(4)]
            + [s[j + 8] ^ s[j + 4] for j in range(4)]
        )
        self.counter = _bump(self.counter)

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 128."""
        chunks = []
        for _ in range(_check_size(size, self.BLOCK)):
            chunks.append(struct.pack("<16Q", *self.output))
            self._step()
        return b"".join(chunks)


class ShishuaHalf:
    """SHISHUA half: 8 words of state, 32 bytes per step."""

    BLOCK = 32
    _ROUNDS = 4
    _STEPS = 5

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0)):
        seed = _check_seed(seed)
        self.state = list(PHI[:8])
        self.output = [0] * 4
        self.counter = [0] * 4
        for i, word in enumerate(seed):
            self.state[2 * i] ^= word
        for _ in range(self._ROUNDS):
            for _ in range(self._STEPS):
                self._step()
            self.state = self.state[4:] + self.output

    def _step(self) -> None:
        self.output = _mix(self.state, self.counter)
        self.counter = _bump(self.counter)

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of 32."""
        chunks = []
        for _ in range(_check_size(size, self.BLOCK)):
            chunks.append(struct.pack("<4Q", *self.output))
            self._step()
        return b"".join(chunks)


class SS64:
    """SHISHUA seeded with 32 bytes drawn once from a feeder."""

    SEED_BYTES = 32

    def __init__(self, feeder: Feeder):
        self.feeder = feeder
        data = bytes(feeder(self.SEED_BYTES))
        if len(data) != self.SEED_BYTES:
            raise ValueError(
                f"feeder returned {len(data)} bytes, expected {self.SEED_BYTES}"
            )
        self.pool = struct.unpack("<4Q", data)
        self.shishua = Shishua(self.pool)

    def fill(self, n: int) -> bytes:
        """Return ``n`` bytes; ``n`` must be a multiple of 128."""
        return self.shishua.generate(n)