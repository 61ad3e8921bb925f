[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jeweljam"
version = "0.1.0"
description = "A match-3 puzzle game where you swap shapes to line up three of a kind."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "puzzle", "match-3", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jeweljam = "jeweljam.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jeweljam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
