[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roguekit"
version = "0.1.0"
description = "Building blocks for roguelike games: text consoles, REXPaint images, dice and render data"
requires-python = ">=3.10"
keywords = ["roguelike", "console", "rexpaint", "codepage437", "dice", "tileset"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["roguekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
