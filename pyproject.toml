[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkedge"
version = "0.1.0"
description = "Building blocks for a camera-based parking occupancy sensor: spot occupancy, motion masks and lighting board commands"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["parking", "occupancy", "vision", "sensor", "edge", "motion-detection", "lighting"]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["parkedge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
