[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softlang"
version = "0.1.0"
description = "Runtime values, native standard library and a stack-based bytecode virtual machine for the Soft programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "bytecode", "virtual machine", "stack machine", "standard library", "programming language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["softlang"]

[tool.hatch.build.targets.sdist]
include = ["softlang", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
