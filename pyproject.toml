[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rentaldesk"
version = "0.1.0"
description = "A counter-side firearm rental desk: a fixed inventory, a bounded transaction ledger with timed expiry, a comma-separated record file and a menu-driven terminal session."
requires-python = ">=3.10"
dependencies = []
keywords = ["rental", "inventory", "ledger", "transactions", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rentaldesk = "rentaldesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rentaldesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
