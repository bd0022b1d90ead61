[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symtab"
version = "0.1.0"
description = "Scoped, hash-bucketed symbol tables with a command-driven driver and hash collision reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "scope", "compiler", "hashing", "sdbm", "djb2", "fnv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
symtab = "symtab.cli:main"
symtab-report = "symtab.report:main"

[tool.hatch.build.targets.wheel]
packages = ["symtab"]

[tool.pytest.ini_options]
addopts = "-ra"
