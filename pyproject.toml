[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multitetris"
version = "0.1.0"
description = "Tetris with Super Rotation System rules, shown in pygame and Tk views that share one game model"
requires-python = ">=3.10"
keywords = ["tetris", "game", "puzzle", "pygame", "tkinter", "srs"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
multitetris = "multitetris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["multitetris"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
