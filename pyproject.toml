[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedbench"
version = "0.1.0"
description = "Discrete-time simulator for benchmarking CPU thread schedulers"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "simulation", "benchmark", "round-robin", "operating-systems"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedbench = "schedbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["schedbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
