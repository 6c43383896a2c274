[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "permc"
version = "0.18.1"
description = "Front end pieces for a small permission-typed language: lexer, syntax tree, symbol table, type checks and diagnostics"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "permissions", "symbol-table", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["permc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
