[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lpyp"
version = "1.0.0"
description = "A small command-line option parser with callback dispatch and aligned help output"
requires-python = ">=3.10"
dependencies = []
keywords = ["argv", "options", "command-line", "parser", "getopt", "help"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lpyp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
