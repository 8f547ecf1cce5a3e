[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argkit"
version = "0.0.1"
description = "A small command-line argument parser with short and long options, option-arguments, negation prefixes and subcommands"
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "options", "cli", "subcommands", "getopt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
argkit-echo = "argkit.echo:main"
argkit-help-output = "argkit.echo:help_main"

[tool.hatch.build.targets.wheel]
packages = ["argkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
