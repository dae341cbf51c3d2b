[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bemstokes"
version = "0.1.0"
description = "Stokes flow fundamental solutions, free-surface image kernels, a direct preconditioner and flagellar geometry for boundary element methods"
requires-python = ">=3.10"
keywords = ["stokes", "boundary element method", "stokeslet", "green function", "microswimmer", "flagellum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bemstokes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
