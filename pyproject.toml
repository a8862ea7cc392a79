[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon-crawl"
version = "0.1.0"
description = "A turn-based terminal dungeon crawler with classes, weapons, potions, bosses and save files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "roguelike", "terminal", "rpg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeon-crawl = "dungeon_crawl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon_crawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
