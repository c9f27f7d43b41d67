[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warcaby"
version = "0.1.0"
description = "Checkers (warcaby) against a minimax AI, in the console or a pygame window"
requires-python = ">=3.10"
keywords = ["checkers", "draughts", "warcaby", "minimax", "alpha-beta", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
warcaby = "warcaby.main:main"
warcaby-measure = "warcaby.measurement:main"

[tool.hatch.build.targets.wheel]
packages = ["warcaby"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
