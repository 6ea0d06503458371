[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomlkit_lite"
version = "0.1.0"
description = "A small TOML tokenizer and value model: spans, tokens, precise errors and conversion of Python data to TOML values."
requires-python = ">=3.10"
dependencies = []
keywords = ["toml", "tokenizer", "lexer", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tomlkit_lite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
