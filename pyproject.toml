[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snekobj"
version = "0.1.0"
description = "A small dynamic object model with manual reference counting and a growable stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "object-model", "reference-counting", "stack"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["snekobj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
