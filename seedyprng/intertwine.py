"""Interleave several byte streams one byte at a time.

Output stops where the shortest stream ends; streams listed before the one
that ran out contribute one more byte to the final round.
"""

import sys
from contextlib import ExitStack
from typing import BinaryIO, Iterator, List, Optional, Sequence

BUFSIZE = 1 << 17

_USAGE = (
    "Usage: intertwine [args] <FILE1> <FILE2>\n"
    "Intertwine blocks from two sources.\n"
    "\n"
    "  --block-size: as bytes (default 1).\n"
)


def intertwine(streams: Sequence[BinaryIO]) -> Iterator[bytes]:
    """Yield chunks of the byte-by-byte interleaving of ``streams``."""
    streams = list(streams)
    if not streams:
        raise ValueError("at least one stream is needed")
    count = len(streams)
    while True:
        chunks = [stream.read(BUFSIZE) or b"" for stream in streams]
        longest = max(len(chunk) for chunk in chunks)
        out = bytearray(count * longest)
        usable = count * BUFSIZE
        for i, chunk in enumerate(chunks):
            out[i:i + count * len(chunk):count] = chunk
            if len(chunk) < BUFSIZE:
                usable = min(usable, count * len(chunk) + i)
        if usable > 0:
            yield bytes(out[:usable])
        if any(not chunk for chunk in chunks):
            return


def _parse_args(argv: List[str]):
    show_help = False
    block_size = 1
    files: List[str] = []
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            show_help = True
        elif arg == "--block-size":
            try:
                block_size = int(next(args))
            except StopIteration:
                raise ValueError("option --block-size needs a value") from None
        elif arg == "--":
            files.extend(args)
            break
        elif not arg.startswith("-"):
            files.append(arg)
            files.extend(args)
            break
    return show_help, block_size, files


def main(argv: Optional[List[str]] = None) -> int:
    """Interleave the named files onto standard output."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        show_help, _block_size, files = _parse_args(list(argv))
    except ValueError as exc:
        print(f"intertwine: {exc}", file=sys.stderr)
        return 1
    if show_help or not files:
        sys.stderr.write(_USAGE)
        return 1
    out = sys.stdout.buffer
    try:
        with ExitStack() as stack:
            streams = [stack.enter_context(open(path, "rb")) for path in files]
            for chunk in intertwine(streams):
                out.write(chunk)
        out.flush()
    except OSError as exc:
        print(f"intertwine: {exc}", file=sys.stderr)
        return 1
    return 0