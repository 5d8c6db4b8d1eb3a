# seedyprng

Deterministic pseudo-random generators, a seekable noise map and small
prime-number helpers, written in plain Python with no third-party
dependencies.

None of these generators is suitable for cryptographic use.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module                 | Contents                                                                              |
|------------------------|---------------------------------------------------------------------------------------|
| `seedyprng.primes`     | `is_prime(n, bits)` and `next_prime(n, bits)` on 16-, 32- or 64-bit unsigned integers  |
| `seedyprng.quadxor`    | `QX16` and `QX32`: two word pools, refilled from a feeder, mixed by rotation and XOR   |
| `seedyprng.noisemap`   | `NoiseMap64`: a random-access byte stream you can `seek` to any 64-bit position        |
| `seedyprng.shishua`    | `Shishua`, `ShishuaHalf`, and `SS64` (a `Shishua` seeded once from a feeder)           |
| `seedyprng.classic`    | `Romu`, `RC4`, `WyRand`, `Xoshiro256Plus`, `Xoshiro256PlusX8`, `Lehmer128`             |
| `seedyprng.chacha8`    | `ChaCha8`: eight-round ChaCha keystream used as a generator                            |
| `seedyprng.bench`      | `parse_seed`, `make_generator` and the `seedyprng-bench` command                       |
| `seedyprng.intertwine` | `intertwine(streams)` and the `seedyprng-intertwine` command                           |
| `seedyprng.vectorgen`  | `render_test_vectors()` and the `seedyprng-vectorgen` command                          |
| `seedyprng.nextprime`  | the `seedyprng-nextprime` command                                                      |

## Seeded generators

`Shishua`, `ShishuaHalf`, `ChaCha8` and the classes in `seedyprng.classic`
take a seed of four 64-bit words (all zero by default) and return bytes from
`generate(size)`. Words are written little-endian. `size` must be a multiple
of the generator's block size, otherwise `ValueError` is raised:

| Generator                                    | Block size          |
|----------------------------------------------|---------------------|
| `Shishua`                                    | 128 bytes           |
| `ShishuaHalf`                                | 32 bytes            |
| `ChaCha8`                                    | 512 bytes (256 with `lanes=4`) |
| `Xoshiro256PlusX8`                           | 64 bytes            |
| `Romu`, `WyRand`, `Xoshiro256Plus`, `Lehmer128` | 8 bytes          |
| `RC4`                                        | any size            |

```python
from seedyprng.shishua import Shishua
from seedyprng.classic import RC4

data = Shishua((1, 2, 3, 4)).generate(256)
stream = RC4((0x243F6A8885A308D3, 0, 0, 0)).generate(10)
```

## Feeder-driven generators

`QX16`, `QX32` and `SS64` take a *feeder*: a callable given a byte count
that must return exactly that many bytes. `QX16` and `QX32` draw their pools
from it whenever their step counter wraps to zero; `SS64` draws a 32-byte
seed from it once. They return bytes from `fill(n)`. For `QX16` and `QX32`
any `n` works; `SS64.fill` needs a multiple of 128.

```python
import os
from seedyprng.quadxor import QX32
from seedyprng.shishua import SS64

QX32(os.urandom).fill(10)
SS64(os.urandom).fill(128)
```

## Noise map

`NoiseMap64(noise, multiplier)` takes `NOISE_BYTES` (2 MiB) of table data and
a 64-bit multiplier. `seek(pos)` moves the read position, `fill(n)` reads
`n` bytes and advances it, and `block(i)` returns the 64-bit block at index
`i`. Reading the same position twice gives the same bytes.

```python
import os
from seedyprng.noisemap import NoiseMap64, NOISE_BYTES

noise = NoiseMap64(os.urandom(NOISE_BYTES), 0x9E3779B97F4A7C15)
noise.seek(1000)
first = noise.fill(16)
noise.seek(1000)
assert noise.fill(16) == first
```

## Primes

```python
from seedyprng.primes import is_prime, next_prime

next_prime(100, 16)   # 101
next_prime(0, 32)     # 2; 0 and 1 both give 2
```

The primality test is trial division with the generators' own conventions:
`is_prime` accepts 0 and 1 and rejects 2 and 3. `next_prime(n, bits)` returns
the first value after `n` that `is_prime` accepts, so `next_prime(2)` is 5.
Arithmetic wraps within the chosen width; values that do not fit raise
`ValueError`.

## Command-line tools

Print the value `next_prime` gives for a start number (`--bits` chooses 16,
32 or 64, default 64):

```
seedyprng-nextprime 1000
seedyprng-nextprime --bits 16 65000
```

Stream a generator's output to standard output and report timing on
standard error. Options: `--bytes`/`-b`, `--seed`/`-s` (hexadecimal, 16
digits per word), `--quiet`/`-q` (generate without writing), and
`--algorithm`/`-a` (`shishua` by default; `--help` lists the names):

```
seedyprng-bench --bytes 1048576 --quiet
seedyprng-bench -a chacha8 -s 243f6a8885a308d3 -b 4096 > out.bin
```

Interleave the bytes of several files, one byte from each in turn, stopping
where the shortest file ends. `--block-size` is accepted but does not change
the output:

```
seedyprng-intertwine first.bin second.bin > mixed.bin
```

Write the SHISHUA reference vectors (both generators, zero seed and a seed of
pi digits, 512 bytes each) as a header of byte tables, to `test-vectors.h` or
to the path given:

```
seedyprng-vectorgen
seedyprng-vectorgen vectors.h
```

## What this package does not do

It gathers no entropy of its own: there is no built-in seeder from timing
or system state. Feeder-driven generators and the noise map take their
randomness from whatever callable or bytes you supply, for example
`os.urandom`. There are no statistical test batteries either; pipe
`seedyprng-bench` output into an external tool for that.