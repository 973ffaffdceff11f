[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ntkit"
version = "0.1.0"
description = "Signed integers with word-size comparisons, seeded pseudo-random word generators, SHA-1 and test samplers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bignum",
    "integer",
    "number theory",
    "gcd",
    "random",
    "kiss",
    "mersenne twister",
    "sha1",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["ntkit"]

[tool.hatch.build.targets.sdist]
include = ["ntkit", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
