[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "traitplay"
version = "0.1.0"
description = "Small polymorphism exercises: map-like views with key iteration and reward objects built from transfer records"
requires-python = ">=3.10"
dependencies = []
keywords = ["polymorphism", "interfaces", "mapping", "rewards", "examples"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
traitplay = "traitplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["traitplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
