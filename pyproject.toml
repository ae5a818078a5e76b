[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termflex"
version = "0.6.3"
description = "Declarative, flexbox-style building blocks for terminal user interfaces"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["tui", "terminal", "ui", "cli", "flexbox", "widgets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termflex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
