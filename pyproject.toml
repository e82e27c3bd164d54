[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puttgolf"
version = "0.1.0"
description = "A small top-down mini-golf game with levels drawn as colour-coded images"
requires-python = ">=3.10"
keywords = ["golf", "mini-golf", "game", "pygame", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
puttgolf = "puttgolf.game:main"
puttgolf-readmap = "puttgolf.readmap:main"

[tool.hatch.build.targets.wheel]
packages = ["puttgolf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
