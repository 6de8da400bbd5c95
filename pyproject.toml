[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytefind"
version = "0.1.0"
description = "Byte and substring search routines: a single-byte scanner, Two-Way, reverse Rabin-Karp, Shift-Or and a packed-pair prefilter."
requires-python = ">=3.10"
dependencies = []
keywords = ["memchr", "memmem", "substring", "search", "bytes", "two-way", "rabin-karp", "shift-or"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bytefind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
