[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagesim"
version = "0.1.0"
description = "Step-by-step simulation of FIFO and LFU page replacement"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "page replacement",
    "operating systems",
    "virtual memory",
    "fifo",
    "lfu",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagesim = "pagesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pagesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
