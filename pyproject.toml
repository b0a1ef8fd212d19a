[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgpacalc"
version = "0.1.0"
description = "Interactive CGPA calculator that tracks courses by semester and computes grade point averages"
requires-python = ">=3.10"
dependencies = []
keywords = ["gpa", "cgpa", "grades", "curriculum", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cgpacalc = "cgpacalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cgpacalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
