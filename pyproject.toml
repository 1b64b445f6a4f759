[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volezk"
version = "0.1.0"
description = "Binary-field arithmetic, universal hashing, seed-tree opening and constraint builders for VOLE-based zero-knowledge proofs"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "zero-knowledge", "vole", "galois-field", "binary-field", "commitment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["volezk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
