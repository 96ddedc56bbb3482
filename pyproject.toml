[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metispart"
version = "0.1.0"
description = "Multilevel graph and mesh partitioning building blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "partitioning", "mesh", "dual graph", "coarsening"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["metispart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
