[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkstruct"
version = "0.1.0"
description = "A singly linked list and a LIFO stack built on it, holding values of any type."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "singly linked list", "stack", "lifo", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkstruct"]

[tool.pytest.ini_options]
addopts = "-ra"
