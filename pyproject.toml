[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ddlapack"
version = "0.1.0"
description = "Double-double precision BLAS and LAPACK building blocks in pure Python"
requires-python = ">=3.10"
keywords = [
    "linear algebra",
    "blas",
    "lapack",
    "extended precision",
    "double-double",
    "householder",
    "cholesky",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "mpmath",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["ddlapack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
