[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoworks"
version = "0.1.0"
description = "Classic algorithms and data structures: searches, sorts, heaps, hash tables, search trees and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "avl-tree",
    "binary-search-tree",
    "hash-table",
    "heap",
    "deque",
    "graph",
    "dijkstra",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algoworks = "algoworks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algoworks"]

[tool.hatch.build.targets.sdist]
include = ["algoworks", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
