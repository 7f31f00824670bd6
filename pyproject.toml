[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraylab"
version = "0.1.0"
description = "A fixed-capacity array abstract data type and classic array algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "array",
    "algorithms",
    "data structures",
    "search",
    "set operations",
    "memory layout",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arraylab-demo = "arraylab.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["arraylab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
