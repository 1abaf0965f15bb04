[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enigma-research"
version = "0.1.0"
description = "Astrological research calculations: aspects, midpoints, parallels, harmonics, oblique longitudes, hypothetical planets and control groups."
requires-python = ">=3.10"
dependencies = []
keywords = ["astrology", "astronomy", "midpoints", "aspects", "harmonics", "control groups"]
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
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enigma_research"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
