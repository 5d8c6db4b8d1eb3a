"""ChaCha8 keystream used as a fast, non-cryptographic generator.

The state holds the usual "expand 32-byte k" constants, a 256-bit key made
of the four seed words (low half first), a 64-bit block counter in words 12
and 13, and a zero nonce. Blocks are emitted in counter order, each as 64
little-endian bytes. Output comes in batches of 8 blocks (512 bytes), or of
4 blocks (256 bytes) when built with ``lanes=4``. Each batch advances the
counter by the number of blocks in it.

Do not use this for cryptographic purposes.
"""

import struct
from typing import List, Sequence, Tuple

from .shishua import _check_seed, _check_size

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1

CONSTANTS: Tuple[int, int, int, int] = struct.unpack("<4I", b"expand 32-byte k")

_BLOCK_BYTES = 64
_SUPPORTED_LANES = (4, 8)

# Column rounds, then diagonal rounds.
_DOUBLE_ROUND = (
    (0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
    (0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14),
)


def _rotl32(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK32


def _quarter_round(x: List[int], a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl32(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl32(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl32(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl32(x[b] ^ x[c], 7)


class ChaCha8:
    """ChaCha with 8 rounds, keyed by four 64-bit seed words."""

    ROUNDS = 8

    def __init__(self, seed: Sequence[int] = (0, 0, 0, 0), lanes: int = 8):
        if lanes not in _SUPPORTED_LANES:
            raise ValueError(f"lanes must be one of {_SUPPORTED_LANES}, got {lanes}")
        words = _check_seed(seed)
        self.lanes = lanes
        self.key = tuple(
            half for word in words for half in (word & _MASK32, word >> 32)
        )
        self.nonce = (0, 0)
        self.counter = 0

    @property
    def block_size(self) -> int:
        """Bytes produced per batch: 64 bytes for each lane."""
        return _BLOCK_BYTES * self.lanes

    @property
    def state(self) -> Tuple[int, ...]:
        """The sixteen 32-bit input words for the next block."""
        return (
            CONSTANTS
            + self.key
            + (self.counter & _MASK32, self.counter >> 32)
            + self.nonce
        )

    def _block(self, counter: int) -> bytes:
        initial = list(
            CONSTANTS + self.key + (counter & _MASK32, counter >> 32) + self.nonce
        )
        x = initial[:]
        for _ in range(self.ROUNDS // 2):
            for a, b, c, d in _DOUBLE_ROUND:
                _quarter_round(x, a, b, c, d)
        return struct.pack(
            "<16I", *((w + o) & _MASK32 for w, o in zip(x, initial))
        )

    def generate(self, size: int) -> bytes:
        """Return ``size`` bytes; ``size`` must be a multiple of the batch size."""
        batches = _check_size(size, self.block_size)
        blocks = batches * self.lanes
        start = self.counter
        out = b"".join(
            self._block((start + k) & _MASK64) for k in range(blocks)
        )
        self.counter = (start + blocks) & _MASK64
        return out