[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doce"
version = "0.1.0"
description = "A console card game menu with a card deck, turn reports and an online ranking client"
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "console", "ranking", "stack", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
doce = "doce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["doce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
