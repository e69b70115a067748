[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dtl"
version = "0.1.0"
description = "Transit-encoded entity values and data transformation functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["transit", "json", "entity", "transformation", "dtl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dtl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
