[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgo"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, memory allocation, page replacement and disk scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "fcfs",
    "priority scheduling",
    "page replacement",
    "fifo",
    "memory allocation",
    "first fit",
    "best fit",
    "worst fit",
    "disk scheduling",
    "scan",
    "c-scan",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
osalgo = "osalgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
