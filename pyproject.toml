[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "resourcetext"
version = "0.1.0"
description = "Resource bookkeeping and keyboard-driven text menus for a simulation game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "resources", "text-ui", "menu", "terminal"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["resourcetext"]

[tool.pytest.ini_options]
addopts = "-ra"
