[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sixfive"
version = "0.1.0"
description = "6502 support library: ld65 map file parsing, single-step test scenarios and RAM/ROM devices"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["6502", "emulator", "ld65", "map-file", "cc65", "single-step", "validation"]
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
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sixfive"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
