[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seedyprng"
version = "0.1.0"
description = "Pure Python pseudo-random generators, a seekable noise map and prime helpers, with small command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "prng",
    "random",
    "shishua",
    "chacha8",
    "xoshiro",
    "romu",
    "wyrand",
    "rc4",
    "lehmer",
    "primes",
    "noise",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seedyprng-bench = "seedyprng.bench:main"
seedyprng-intertwine = "seedyprng.intertwine:main"
seedyprng-vectorgen = "seedyprng.vectorgen:main"
seedyprng-nextprime = "seedyprng.nextprime:main"

[tool.hatch.build.targets.wheel]
packages = ["seedyprng"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
