[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cuckoocycle"
version = "0.1.0"
description = "Cuckoo Cycle proof-of-work primitives: SipHash-2-4 edge generation and cycle proof verification"
requires-python = ">=3.10"
dependencies = []
keywords = ["cuckoo-cycle", "proof-of-work", "siphash", "sha256", "verification"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cuckoocycle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
