from io import BytesIO

import pytest

from seedyprng.intertwine import BUFSIZE, intertwine, main


def _run(*datas):
    return b"".join(intertwine([BytesIO(d) for d in datas]))


def test_shorter_second_stream():
    assert _run(b"12345", b"abc") == b"1a2b3c4"


def test_shorter_first_stream():
    assert _run(b"abc", b"12345") == b"a1b2c3"


def test_single_stream_passes_through():
    data = bytes(range(256)) * 3
    assert _run(data) == data


def test_equal_streams_across_buffers():
    first = bytes(range(256)) * 600
    second = bytes(reversed(range(256))) * 600
    assert len(first) > BUFSIZE
    out = _run(first, second)
    assert len(out) == 2 * len(first)
    assert out[0::2] == first
    assert out[1::2] == second


def test_three_streams_length_limited_by_shortest():
    out = _run(b"a" * 10, b"b" * 4, b"c" * 10)
    assert out[0::3] == b"a" * 5
    assert out[1::3] == b"b" * 4
    assert out[2::3] == b"c" * 4


def test_empty_stream_gives_nothing():
    assert _run(b"", b"abc") == b""


def test_no_streams_rejected():
    with pytest.raises(ValueError):
        list(intertwine([]))


def test_main_with_files(tmp_path, capsysbinary):
    a = tmp_path / "a.bin"
    b = tmp_path / "b.bin"
    a.write_bytes(b"xyz")
    b.write_bytes(b"XYZ")
    assert main(["--block-size", "4", "--", str(a), str(b)]) == 0
    out = capsysbinary.readouterr().out
    assert out[0::2] == b"xyz"
    assert out[1::2] == b"XYZ"


def test_main_help(capsysbinary):
    assert main(["-h"]) == 1
    assert b"Usage" in capsysbinary.readouterr().err


def test_main_missing_file(tmp_path, capsysbinary):
    assert main([str(tmp_path / "missing.bin")]) == 1
    assert capsysbinary.readouterr().out == b""