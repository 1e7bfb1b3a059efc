[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlparse"
version = "0.1.0"
description = "GraphQL query and schema definition language parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "parser", "sdl", "schema", "lexer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gqlparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
