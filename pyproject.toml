[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsynthkit"
version = "0.1.0"
description = "Reversible and linear quantum circuit synthesis and CNOT resynthesis"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "circuit", "synthesis", "reversible logic", "cnot", "reed-muller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Quantum Computing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qsynthkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
