[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cappuccina"
version = "0.1.0"
description = "An evaluator for primitive recursive and mu-recursive function definitions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "recursion",
    "primitive recursive functions",
    "mu-recursive functions",
    "computability",
    "interpreter",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cappuccina"]

[tool.pytest.ini_options]
addopts = "-ra"
