[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathalg"
version = "0.1.0"
description = "Path algebras of quivers over finite prime fields, with noncommutative Groebner bases"
requires-python = ">=3.10"
dependencies = []
keywords = ["path algebra", "quiver", "groebner basis", "buchberger", "noncommutative algebra"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathalg = "pathalg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pathalg"]

[tool.pytest.ini_options]
addopts = "-ra"
