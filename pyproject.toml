[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seastate"
version = "0.1.0"
description = "Ocean surface wave models: Gerstner and trochoid wavefields, wave spectra, depth sampling and wave parameter records."
requires-python = ">=3.10"
dependencies = []
keywords = ["waves", "ocean", "gerstner", "trochoid", "wave spectrum", "simulation"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seastate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
