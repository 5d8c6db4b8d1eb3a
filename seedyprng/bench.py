"""Throughput harness: stream a chosen generator's bytes to standard output.

Reports the time spent generating per byte and the overall rate on
standard error when done.
"""

import re
import sys
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .chacha8 import ChaCha8
from .classic import RC4, Lehmer128, Romu, WyRand, Xoshiro256Plus, Xoshiro256PlusX8
from .shishua import Shishua, ShishuaHalf

BUFSIZE = 1 << 17
DEFAULT_BYTES = 0x7FFFFFFFFFFFFFFF
DEFAULT_ALGORITHM = "shishua"

# A multiple of every generator's block size.
_ALIGN = 512
_HEX_WORD = 16

GENERATORS = {
    "shishua": Shishua,
    "shishua-half": ShishuaHalf,
    "chacha8": ChaCha8,
    "romu": Romu,
    "rc4": RC4,
    "wyrand": WyRand,
    "xoshiro256plus": Xoshiro256Plus,
    "xoshiro256plusx8": Xoshiro256PlusX8,
    "lehmer128": Lehmer128,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]*")

_USAGE = (
    "Usage: prng [args]\n"
    "A PRNG.\n"
    "\n"
    "  --bytes: as bytes.\n"
    "  --seed: as hexadecimal.\n"
    "  --quiet: don't dump output to stdout\n"
    f"  --algorithm: one of {', '.join(GENERATORS)} (default {DEFAULT_ALGORITHM}).\n"
)


def parse_seed(text: str) -> Tuple[int, int, int, int]:
    """Split a hex string into four 64-bit words, 16 digits per word.

    A short final group is padded on the right with zeros, missing groups
    are zero, and each group is read up to its first non-hex character.
    """
    words = []
    for k in range(4):
        group = text[k * _HEX_WORD:(k + 1) * _HEX_WORD].ljust(_HEX_WORD, "0")
        digits = _LEADING_HEX.match(group).group(0)
        words.append(int(digits, 16) if digits else 0)
    return tuple(words)


def make_generator(name: str, seed: Sequence[int]):
    """Build the generator called ``name`` from a four-word seed."""
    try:
        factory = GENERATORS[name]
    except KeyError:
        raise ValueError(
            f"unknown generator {name!r}; expected one of {', '.join(GENERATORS)}"
        ) from None
    return factory(tuple(seed))


@dataclass
class _Options:
    total: int = DEFAULT_BYTES
    seed: Tuple[int, int, int, int] = (0, 0, 0, 0)
    quiet: bool = False
    algorithm: str = DEFAULT_ALGORITHM
    ok: bool = True


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _value(args: Iterator[str], flag: str) -> str:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"option {flag} needs a value") from None


def _parse_args(argv: List[str]) -> _Options:
    options = _Options()
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            sys.stderr.write(_USAGE)
            options.ok = False
        elif arg in ("-b", "--bytes"):
            options.total = _leading_int(_value(args, arg))
            if options.total <= 0:
                options.ok = False
        elif arg in ("-q", "--quiet"):
            options.quiet = True
        elif arg in ("-s", "--seed"):
            options.seed = parse_seed(_value(args, arg))
        elif arg in ("-a", "--algorithm"):
            options.algorithm = _value(args, arg)
    return options


def main(argv: Optional[List[str]] = None) -> int:
    """Write the requested number of generated bytes and report the speed."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = _parse_args(list(argv))
        if not options.ok:
            return 1
        generator = make_generator(options.algorithm, options.seed)
    except ValueError as exc:
        print(f"prng: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout.buffer
    generating_ns = 0
    started = time.perf_counter_ns()
    remaining = options.total
    try:
        while remaining > 0:
            take = min(remaining, BUFSIZE)
            size = -(-take // _ALIGN) * _ALIGN
            mark = time.perf_counter_ns()
            chunk = generator.generate(size)
            generating_ns += time.perf_counter_ns() - mark
            if not options.quiet:
                out.write(chunk[:take])
            remaining -= take
        out.flush()
    except BrokenPipeError:
        return 1
    elapsed = max(time.perf_counter_ns() - started, 1)
    print(
        f"{options.algorithm:<20}\t{generating_ns / options.total:f} ns/byte"
        f"\t{options.total / elapsed:.2f} GB/s",
        file=sys.stderr,
    )
    return 0