[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galaxysim"
version = "0.1.0"
description = "A small gravitational N-body galaxy simulation with a live pygame view"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["galaxy", "n-body", "gravity", "simulation", "astronomy", "pygame"]
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
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
galaxysim = "galaxysim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["galaxysim"]

[tool.pytest.ini_options]
addopts = "-ra"
