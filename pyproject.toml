[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loxparse"
version = "0.1.0"
description = "Scanner, expression parser and AST printer for the Lox language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "parser", "scanner", "lexer", "ast", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.scripts]
loxparse = "loxparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loxparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
