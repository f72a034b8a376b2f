[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisims"
version = "0.1.0"
description = "Small simulations and classic data-structure exercises: blackjack, Huffman coding, an LRU cache and an RPN calculator."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "blackjack",
    "huffman",
    "binary-tree",
    "lru-cache",
    "rpn",
    "linked-list",
    "mersenne-twister",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minisims-blackjack = "minisims.blackjack:main"
minisims-compress = "minisims.compress:main"
minisims-decompress = "minisims.decompress:main"
minisims-cache = "minisims.cache:main"
minisims-rpn = "minisims.rpn:main"

[tool.hatch.build.targets.wheel]
packages = ["minisims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
