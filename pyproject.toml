[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memorymatch"
version = "0.1.0"
description = "A card-matching memory game (concentration) played with the mouse"
requires-python = ">=3.10"
keywords = ["game", "memory", "concentration", "cards", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
memorymatch = "memorymatch.game:main"

[tool.hatch.build.targets.wheel]
packages = ["memorymatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
