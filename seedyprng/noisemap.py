"""NoiseMap64: a seekable byte stream addressed by a 64-bit position.

Each 8-byte block is the XOR of four table entries picked by the 16-bit
lanes of ``block_index * multiplier``.
"""

import sys
from array import array

TABLES = 4
TABLE_SIZE = 65536
NOISE_BYTES = TABLES * TABLE_SIZE * 8

_MASK64 = (1 << 64) - 1
_BLOCK_MASK = _MASK64 >> 3


class NoiseMap64:
    """Random-access noise stream over four tables of 64-bit words."""

    def __init__(self, noise: bytes, multiplier: int):
        if len(noise) != NOISE_BYTES:
            raise ValueError(f"noise must be {NOISE_BYTES} bytes, got {len(noise)}")
        if not 0 <= multiplier <= _MASK64:
            raise ValueError("multiplier must fit in 64 unsigned bits")
        words = array("Q")
        words.frombytes(bytes(noise))
        if sys.byteorder == "big":
            words.byteswap()
        self.tables = tuple(
            words[k * TABLE_SIZE:(k + 1) * TABLE_SIZE] for k in range(TABLES)
        )
        self.multiplier = multiplier
        self.seek_pos = 0

    def seek(self, pos: int) -> None:
        """Move the read position to byte ``pos``."""
        if not 0 <= pos <= _MASK64:
            raise ValueError("position must fit in 64 unsigned bits")
        self.seek_pos = pos

    def block(self, i: int) -> int:
        """Return the 64-bit block with index ``i``."""
        pos = ((i & _MASK64) * self.multiplier) & _MASK64
        result = 0
        for k, table in enumerate(self.tables):
            result ^= table[(pos >> (16 * k)) & 0xFFFF]
        return result

    def fill(self, n: int) -> bytes:
        """Read ``n`` bytes from the current position and advance it."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        if n == 0:
            return b""
        start = self.seek_pos
        end = start + n
        data = b"".join(
            self.block(k & _BLOCK_MASK).to_bytes(8, "little")
            for k in range(start >> 3, (end + 7) >> 3)
        )
        offset = start & 7
        self.seek_pos = end & _MASK64
        return data[offset:offset + n]