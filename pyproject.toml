[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tbquake"
version = "0.8.1"
description = "Quake map entities, coordinate conversions and special texture helpers for TrenchBroom maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["quake", "trenchbroom", "map", "entities", "gamedev"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tbquake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
