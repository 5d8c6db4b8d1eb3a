import pytest

from seedyprng.bench import BUFSIZE, main, make_generator, parse_seed
from seedyprng.chacha8 import ChaCha8
from seedyprng.classic import RC4, Lehmer128, Romu, WyRand, Xoshiro256Plus, Xoshiro256PlusX8
from seedyprng.shishua import Shishua, ShishuaHalf

SEED_PI = (0x243F6A8885A308D3, 0x13198A2E03707344, 0xA409382229F31D00, 0x82EFA98EC4E6C894)
SEED_PI_TEXT = "243f6a8885a308d313198a2e03707344a409382229f31d0082efa98ec4e6c894"


def test_parse_seed_empty_is_zero():
    assert parse_seed("") == (0, 0, 0, 0)


def test_parse_seed_full_words():
    assert parse_seed(SEED_PI_TEXT) == SEED_PI


def test_parse_seed_short_group_is_left_aligned():
    assert parse_seed("abc") == parse_seed("abc" + "0" * 13)
    assert parse_seed("abc")[1:] == (0, 0, 0)


def test_parse_seed_second_word_partial():
    words = parse_seed(SEED_PI_TEXT[:16] + "7")
    assert words[0] == SEED_PI[0]
    assert words[1] == parse_seed("7")[0]


@pytest.mark.parametrize(
    "name, factory",
    [
        ("shishua", Shishua),
        ("shishua-half", ShishuaHalf),
        ("chacha8", ChaCha8),
        ("romu", Romu),
        ("rc4", RC4),
        ("wyrand", WyRand),
        ("xoshiro256plus", Xoshiro256Plus),
        ("xoshiro256plusx8", Xoshiro256PlusX8),
        ("lehmer128", Lehmer128),
    ],
)
def test_make_generator_matches_class(name, factory):
    assert make_generator(name, SEED_PI).generate(512) == factory(SEED_PI).generate(512)


def test_make_generator_unknown_name():
    with pytest.raises(ValueError):
        make_generator("nope", (0, 0, 0, 0))


def test_main_writes_exact_byte_count(capsysbinary):
    assert main(["-b", "100"]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == Shishua().generate(128)[:100]


def test_main_with_seed_and_algorithm(capsysbinary):
    assert main(["--algorithm", "wyrand", "--seed", "ff", "-b", "24"]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == WyRand(parse_seed("ff")).generate(24)


def test_main_spans_several_buffers(capsysbinary):
    assert main(["-a", "romu", "--bytes", str(BUFSIZE + 16)]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == Romu().generate(BUFSIZE + 16)


def test_main_quiet_reports_only(capsysbinary):
    assert main(["-q", "-b", "64"]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b""
    assert b"GB/s" in captured.err
    assert b"ns/byte" in captured.err


def test_main_rejects_zero_bytes(capsysbinary):
    assert main(["-b", "0"]) == 1
    assert capsysbinary.readouterr().out == b""


def test_main_help(capsysbinary):
    assert main(["--help"]) == 1
    assert b"Usage" in capsysbinary.readouterr().err


def test_main_missing_value(capsysbinary):
    assert main(["--seed"]) == 1
    assert capsysbinary.readouterr().out == b""


def test_main_unknown_algorithm(capsysbinary):
    assert main(["-a", "nope", "-b", "8"]) == 1
    assert capsysbinary.readouterr().out == b""