[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eikit"
version = "0.1.0"
description = "A small retained-mode widget toolkit: widget tree, frames, buttons, toplevels, entries, picking and damage tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "widgets", "toolkit", "picking", "drawing"]
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
    "Topic :: Software Development :: Widget Sets",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
