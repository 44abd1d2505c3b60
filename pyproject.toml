[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbfc"
version = "0.3.18"
description = "Building blocks for a notebook fan control service: lenient JSON reading and writing, threshold selection, option parsing and help texts"
requires-python = ">=3.10"
dependencies = []
keywords = ["fan", "notebook", "temperature", "thermal", "json", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nbfc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
