[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fp256"
version = "0.1.0"
description = "Limb-level arithmetic on 256-bit unsigned integers: conversions, shifts, division, Montgomery arithmetic and random numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bignum", "arithmetic", "montgomery", "modular", "u256", "limbs"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fp256"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
