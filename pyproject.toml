[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dzerospher"
version = "0.1.0"
description = "Event-level analysis of prompt and non-prompt D0 yields versus spherocity and multiplicity in simulated pp collisions"
requires-python = ">=3.10"
keywords = ["physics", "D0", "spherocity", "multiplicity", "histogram", "pp collisions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dzerospher = "dzerospher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dzerospher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
