import pytest

from seedyprng.noisemap import NOISE_BYTES, NoiseMap64

MASK64 = (1 << 64) - 1


@pytest.fixture(scope="module")
def lane_noise():
    # Table k holds j << (16 * k), so a block reproduces its scrambled position.
    return b"".join(
        (j << (16 * k)).to_bytes(8, "little") for k in range(4) for j in range(65536)
    )


@pytest.fixture
def nm(lane_noise):
    return NoiseMap64(lane_noise, 3)


def test_block_reassembles_position(nm):
    for i in (0, 1, 2, 1000, 2**40 + 7, 2**63):
        assert nm.block(i) == (i * 3) & MASK64


def test_zero_noise_gives_zero_bytes():
    gen = NoiseMap64(bytes(NOISE_BYTES), 12345)
    assert gen.fill(37) == bytes(37)


def test_first_block_bytes(nm):
    assert nm.fill(16) == nm.block(0).to_bytes(8, "little") + nm.block(1).to_bytes(
        8, "little"
    )


def test_fill_advances_seek_pos(nm):
    nm.fill(13)
    assert nm.seek_pos == 13
    nm.fill(5)
    assert nm.seek_pos == 18


def test_split_fills_concatenate(lane_noise):
    a = NoiseMap64(lane_noise, 11)
    b = NoiseMap64(lane_noise, 11)
    whole = a.fill(100)
    pieces = b.fill(3) + b.fill(9) + b.fill(1) + b.fill(87)
    assert pieces == whole


def test_seek_matches_slice(lane_noise):
    a = NoiseMap64(lane_noise, 5)
    stream = a.fill(200)
    b = NoiseMap64(lane_noise, 5)
    for pos in (0, 1, 7, 8, 61, 150):
        b.seek(pos)
        assert b.fill(30) == stream[pos:pos + 30]


def test_fill_zero_leaves_position(nm):
    nm.seek(42)
    assert nm.fill(0) == b""
    assert nm.seek_pos == 42


def test_position_wraps_at_top(nm):
    nm.seek(MASK64 - 3)
    data = nm.fill(8)
    last = nm.block(MASK64 >> 3).to_bytes(8, "little")
    first = nm.block(0).to_bytes(8, "little")
    assert data == last[4:] + first[:4]
    assert nm.seek_pos == 4


def test_wrong_noise_size_rejected():
    with pytest.raises(ValueError):
        NoiseMap64(bytes(NOISE_BYTES - 1), 1)


@pytest.mark.parametrize("multiplier", [-1, 2**64])
def test_bad_multiplier_rejected(multiplier):
    with pytest.raises(ValueError):
        NoiseMap64(bytes(NOISE_BYTES), multiplier)


def test_bad_seek_rejected(nm):
    with pytest.raises(ValueError):
        nm.seek(-1)
    with pytest.raises(ValueError):
        nm.seek(2**64)


def test_negative_fill_rejected(nm):
    with pytest.raises(ValueError):
        nm.fill(-5)