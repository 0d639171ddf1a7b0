[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "solongmap"
version = "0.1.0"
description = "Character, number, byte-buffer, linked-list, printf-style formatting and line-reading helpers for a small tile-map puzzle game"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "printf", "linked-list", "line-reader", "strings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["solongmap*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
