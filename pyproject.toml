[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uvasolve"
version = "0.1.0"
description = "Answers to classic numbered programming problems, as a library and a command-line solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["online-judge", "competitive-programming", "algorithms", "puzzles", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uvasolve = "uvasolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uvasolve"]

[tool.pytest.ini_options]
addopts = "-ra"
