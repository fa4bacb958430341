[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyquery"
version = "0.1.0"
description = "Load integer polygons from a file and answer area, count, rectangle and intersection queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["polygon", "geometry", "shoelace", "intersection", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polyquery = "polyquery.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polyquery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
