[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safeptr"
version = "0.0.1"
description = "Wrappers that make nullability, ownership and borrowing of a reference explicit"
requires-python = ">=3.10"
dependencies = []
keywords = ["null", "optional", "ownership", "borrowing", "safety"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["safeptr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
