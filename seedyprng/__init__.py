"""Deterministic pseudo-random generators, a seekable noise map, prime helpers and command-line tools."""

__version__ = "0.1.0"

__all__ = [
    "bench",
    "chacha8",
    "classic",
    "intertwine",
    "nextprime",
    "noisemap",
    "primes",
    "quadxor",
    "shishua",
    "vectorgen",
]