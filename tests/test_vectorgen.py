import re

import pytest

from seedyprng.shishua import Shishua, ShishuaHalf
from seedyprng.vectorgen import SEED_PI, SEED_ZERO, main, render_test_vectors


@pytest.fixture(scope="module")
def text():
    return render_test_vectors()


def _table(text, name):
    match = re.search(re.escape(name) + r"\[512\] = \{(.*?)\};", text, re.S)
    assert match is not None
    return bytes(int(h, 16) for h in re.findall(r"0x([0-9a-f]{2}),", match.group(1)))


def test_seed_pi_rendered(text):
    assert "static uint64_t seed_pi[4] = {\n  0x243f6a8885a308d3,\n" in text


def test_unseeded_vector_first_row(text):
    assert (
        "static const uint8_t shishua_vector_unseeded[512] = {\n"
        "  0x95, 0x5d, 0x96, 0xf9, 0x0f, 0xb4, 0xaa, 0x53, 0x09, 0x2d, 0x82, 0xe6, 0x3a,\n"
    ) in text


def test_unseeded_vector_last_row(text):
    assert "  0xa7, 0x50, 0xec, 0x93, 0x8f,\n};\n" in text


def test_half_seeded_vector_first_row(text):
    assert (
        "static const uint8_t shishua_half_vector_seeded[512] = {\n"
        "  0x6c, 0xaa, 0x68, 0xc9, 0x70, 0x59, 0x7f, 0xfc, 0x51, 0x5f, 0xff, 0xb2, 0xed,\n"
    ) in text


def test_tables_match_generators(text):
    assert _table(text, "shishua_vector_unseeded") == Shishua(SEED_ZERO).generate(512)
    assert _table(text, "shishua_half_vector_unseeded") == ShishuaHalf(SEED_ZERO).generate(512)
    assert _table(text, "shishua_vector_seeded") == Shishua(SEED_PI).generate(512)
    assert _table(text, "shishua_half_vector_seeded") == ShishuaHalf(SEED_PI).generate(512)


def test_guards(text):
    assert text.splitlines()[1] == "#ifndef TEST_VECTORS_H"
    assert text.endswith("#endif // TEST_VECTORS_H\n")


def test_main_writes_file(tmp_path, text):
    target = tmp_path / "vectors.h"
    assert main([str(target)]) == 0
    assert target.read_text(encoding="ascii") == text


def test_main_unwritable_path(tmp_path):
    assert main([str(tmp_path / "missing" / "vectors.h")]) == 1