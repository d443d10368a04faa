[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringplus"
version = "0.1.0"
description = "C-style string, memory, error-message and printf-style formatting routines for Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "memory", "sprintf", "strtok", "strerror", "trim", "formatting"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stringplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
