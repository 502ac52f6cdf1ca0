[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Binary search tree maps, a circular queue and small backtracking and query exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "data structures",
    "backtracking",
    "circular queue",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dslab-optimal = "dslab.optimal:main"
dslab-imbalance = "dslab.imbalance:main"
dslab-leaves = "dslab.leaves:main"
dslab-unary = "dslab.unary:main"
dslab-diameter = "dslab.diameter:main"
dslab-subtree = "dslab.subtree:main"
dslab-leaf-depth = "dslab.leaf_depth:main"
dslab-same-tree = "dslab.same_tree:main"
dslab-change-data = "dslab.change_data:main"
dslab-queue = "dslab.circular_queue:main"
dslab-backtracking = "dslab.backtracking:main"
dslab-queries = "dslab.queries:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
