"""Quad-XOR generators: two pools of words mixed by rotation and XOR.

Each generator draws its pools from a feeder, a callable that takes a byte
count and returns that many bytes. The pools are refilled whenever the step
counter wraps to zero.
"""

import struct
from typing import Callable, Tuple

Feeder = Callable[[int], bytes]


def _rotl(value: int, amount: int, bits: int) -> int:
    mask = (1 << bits) - 1
    return ((value << amount) | (value >> (bits - amount))) & mask


class _QuadXor:
    _WORD_BITS = 0
    _POOL_WORDS = 0
    _ITER = 0
    _FORMAT = ""

    def __init__(self, feeder: Feeder):
        self.feeder = feeder
        self.step = 0
        self.iter = self._ITER
        self.pools: Tuple[Tuple[int, ...], Tuple[int, ...]] = (
            (0,) * self._POOL_WORDS,
            (0,) * self._POOL_WORDS,
        )

    @property
    def _mask(self) -> int:
        return (1 << self._WORD_BITS) - 1

    @property
    def pool_bytes(self) -> int:
        """Number of bytes requested from the feeder on each refill."""
        return 2 * self._POOL_WORDS * self._WORD_BITS // 8

    def _refill(self) -> None:
        size = self.pool_bytes
        data = bytes(self.feeder(size))
        if len(data) != size:
            raise ValueError(f"feeder returned {len(data)} bytes, expected {size}")
        count = self._POOL_WORDS
        words = struct.unpack(f"<{2 * count}{self._FORMAT}", data)
        self.pools = (words[:count], words[count:])

    def _advance(self, at: Callable[[int], int]) -> int:
        if self.step == 0:
            self._refill()
            self.step = 1
        word = at(self.step)
        self.step = (self.step + 1) & self._mask
        return word

    def _fill_with(self, next_word: Callable[[], int], n: int) -> bytes:
        if n < 0:
            raise ValueError("byte count must not be negative")
        width = self._WORD_BITS // 8
        blocks, rest = divmod(n, width)
        out = b"".join(next_word().to_bytes(width, "little") for _ in range(blocks))
        if rest:
            out += next_word().to_bytes(width, "little")[:rest]
        return out


class QX16(_QuadXor):
    """Quad-XOR over two pools of 4096 16-bit words."""

    _WORD_BITS = 16
    _POOL_WORDS = 4096
    _ITER = 12347
    _FORMAT = "H"

    def at(self, i: int) -> int:
        """Return the mixed word at index ``i`` of the current pools."""
        pos = ((i & 0xFFFF) * self.iter) & 0xFFFF
        rot1 = pos & 0x000F
        pos1 = pos >> 4
        rot2 = pos >> 12
        pos2 = pos & 0x0FFF
        return _rotl(self.pools[0][pos1], rot1, 16) ^ _rotl(
            self.pools[1][pos2], rot2, 16
        )

    def next_word(self) -> int:
        """Return the next word, refilling the pools when the step wraps."""
        return self._advance(self.at)

    def fill(self, n: int) -> bytes:
        """Return ``n`` bytes made of little-endian words.

        A trailing partial word consumes a whole word and keeps its low bytes.
        """
        return self._fill_with(self.next_word, n)


class QX32(_QuadXor):
    """Quad-XOR over two pools of 65536 32-bit words."""

    _WORD_BITS = 32
    _POOL_WORDS = 0x10000
    _ITER = 1234567907
    _FORMAT = "I"

    def at(self, i: int) -> int:
        """Return the mixed word at index ``i`` of the current pools."""
        pos32 = ((i & 0xFFFFFFFF) * self.iter) & 0xFFFFFFFF
        pos1 = pos32 & 0xFFFF
        rot2 = pos32 & 0x1F
        pos2 = pos32 >> 16
        rot1 = (pos32 >> 16) & 0x1F
        return _rotl(self.pools[0][pos1], rot1, 32) ^ _rotl(
            self.pools[1][pos2], rot2, 32
        )

    def next_word(self) -> int:
        """Return the next word, refilling the pools when the step wraps."""
        return self._advance(self.at)

    def fill(self, n: int) -> bytes:
        """Return ``n`` bytes made of little-endian words.

        A trailing partial word consumes a whole word and keeps its low bytes.
        """
        return self._fill_with(self.next_word, n)