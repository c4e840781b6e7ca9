[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cachesim"
version = "0.1.0"
description = "A model of a set-associative cache with LRU replacement, driven by address traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "simulation", "lru", "set-associative", "computer-architecture", "hardware-model"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cachesim = "cachesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cachesim"]

[tool.pytest.ini_options]
addopts = "-ra"
