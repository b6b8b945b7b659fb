[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stellar-upgrader"
version = "0.1.0"
description = "A Stellar CLI plugin that checks and runs smart contract upgrades"
requires-python = ">=3.10"
keywords = ["stellar", "soroban", "smart-contract", "upgrade", "cli"]
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
    "Topic :: Software Development :: Build Tools",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stellar-upgrader = "stellar_upgrader.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stellar_upgrader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
