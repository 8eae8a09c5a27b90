[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catescape"
version = "0.1.0"
description = "A tile-based escape game: guide the cat to every piece of food, then out through the exit."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tile-map", "pygame", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
catescape = "catescape.cli:main"
catescape-bonus = "catescape.cli:main_bonus"

[tool.hatch.build.targets.wheel]
packages = ["catescape"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
