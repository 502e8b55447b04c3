[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoplay"
version = "0.1.0"
description = "Small classic algorithms: sorting, searching, binary search trees, ranking and a maze monster walk."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "binary search tree", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algoplay-maze = "algoplay.maze:main"

[tool.hatch.build.targets.wheel]
packages = ["algoplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
