"""Render the SHISHUA reference vectors as a header of byte tables."""

import argparse
import sys
from typing import List, Optional, Sequence

from .shishua import Shishua, ShishuaHalf

SEED_ZERO = (0, 0, 0, 0)
# Digits of pi in big endian.
SEED_PI = (0x243F6A8885A308D3, 0x13198A2E03707344, 0xA409382229F31D00, 0x82EFA98EC4E6C894)
VECTOR_BYTES = 512
DEFAULT_OUTPUT = "test-vectors.h"

_COLUMNS = (80 - 2) // 6


def _render_seed(name: str, seed: Sequence[int]) -> str:
    lines = [f"static uint64_t {name}[4] = {{\n"]
    lines.extend(f"  0x{word:016x},\n" for word in seed)
    lines.append("};\n")
    return "".join(lines)


def _render_buffer(name: str, data: bytes) -> str:
    parts = [f"static const uint8_t {name}[{len(data)}] = {{"]
    for i, byte in enumerate(data):
        if i % _COLUMNS == 0:
            parts.append("\n ")
        parts.append(f" 0x{byte:02x},")
    parts.append("\n};\n")
    return "".join(parts)


def render_test_vectors() -> str:
    """Return the header text holding the seeds and four 512-byte vectors."""
    return "".join(
        [
            "// This is an autogenerated file, generated by seedyprng.vectorgen\n",
            "#ifndef TEST_VECTORS_H\n",
            "#define TEST_VECTORS_H\n",
            "#include <stdint.h>\n",
            _render_seed("seed_zero", SEED_ZERO),
            _render_seed("seed_pi", SEED_PI),
            _render_buffer(
                "shishua_vector_unseeded", Shishua(SEED_ZERO).generate(VECTOR_BYTES)
            ),
            _render_buffer(
                "shishua_half_vector_unseeded",
                ShishuaHalf(SEED_ZERO).generate(VECTOR_BYTES),
            ),
            _render_buffer(
                "shishua_vector_seeded", Shishua(SEED_PI).generate(VECTOR_BYTES)
            ),
            _render_buffer(
                "shishua_half_vector_seeded",
                ShishuaHalf(SEED_PI).generate(VECTOR_BYTES),
            ),
            "#endif // TEST_VECTORS_H\n",
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Write the reference vectors to a header file."""
    parser = argparse.ArgumentParser(
        prog="gen-test-vectors", description="Write the SHISHUA reference vectors."
    )
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    try:
        with open(args.output, "wb") as handle:
            handle.write(render_test_vectors().encode("ascii"))
    except OSError as exc:
        print(f"gen-test-vectors: {exc}", file=sys.stderr)
        return 1
    return 0