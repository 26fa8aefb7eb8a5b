[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logistichell"
version = "0.1.0"
description = "A small scene-graph game engine with cameras, controllers and polygon rendering"
requires-python = ">=3.10"
keywords = ["game", "engine", "scene-graph", "pygame", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logistichell = "logistichell.game:main"

[tool.hatch.build.targets.wheel]
packages = ["logistichell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
