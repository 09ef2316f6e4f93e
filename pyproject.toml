[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simpan"
version = "0.1.0"
description = "A small terminal warehouse ledger: store customers' items, take them out and track the takings."
requires-python = ">=3.10"
keywords = ["warehouse", "inventory", "storage", "terminal", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simpan = "simpan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simpan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
