[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "humanrate"
version = "0.1.3"
description = "Parse and format bandwidth values in a human-readable form, with decimal or binary prefixes."
requires-python = ">=3.10"
dependencies = []
keywords = ["bandwidth", "network", "human", "parser", "formatter", "units"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["humanrate"]

[tool.pytest.ini_options]
addopts = "-ra"
