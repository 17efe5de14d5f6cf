[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent23"
version = "0.1.0"
description = "Solvers for days 16 to 25 of a 2023 advent-style puzzle calendar."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "graphs", "grids"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
advent23 = "advent23.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent23"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
