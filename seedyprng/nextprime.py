"""Command that prints the first prime after a given start value."""

import argparse
import re
from typing import List, Optional

from .primes import next_prime

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Print the next prime after START, in the chosen unsigned width."""
    parser = argparse.ArgumentParser(
        prog="nextprime", description="Print the first prime after START."
    )
    parser.add_argument("--bits", type=int, choices=(16, 32, 64), default=64)
    parser.add_argument("start", nargs="?", default="0")
    args = parser.parse_args(argv)
    start = _leading_int(args.start) & ((1 << args.bits) - 1)
    print(next_prime(start, args.bits))
    return 0