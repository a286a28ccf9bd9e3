[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atriblog"
version = "0.1.0"
description = "Response caching, JSON output shaping, command discovery and health-report helpers for atrib transparency log tooling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "transparency-log",
    "json",
    "cache",
    "cli",
    "formatting",
    "agents",
]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atriblog"]

[tool.hatch.build.targets.sdist]
include = ["atriblog", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
