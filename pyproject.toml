[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mahjang"
version = "0.1.0"
description = "Mahjong tile set construction and a coloured terminal view of the table and its walls"
requires-python = ">=3.10"
dependencies = []
keywords = ["mahjong", "tiles", "terminal", "ansi", "board game"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mahjang = "mahjang.tablemap:main"

[tool.hatch.build.targets.wheel]
packages = ["mahjang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
