[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small data-structure and CSV exercises: ring queue, min-heap, hash table, binary search tree, sorted map and CSV storage, with console programs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "queue",
    "heap",
    "hash-table",
    "binary-search-tree",
    "csv",
    "insertion-sort",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-diagonal-sort = "labworks.diagonal_sort:main"
labworks-ring-queue = "labworks.ring_queue:main"
labworks-min-heap = "labworks.min_heap:main"
labworks-numbers = "labworks.numbers_app:main"
labworks-language-report = "labworks.language_report:main"
labworks-reservations = "labworks.reservations:main"
labworks-tree-report = "labworks.tree_report:main"
labworks-console = "labworks.console:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
