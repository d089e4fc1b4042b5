[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binarysearchtree"
version = "0.1.0"
description = "Binary trees and binary search trees with parent links, traversal queries and Graphviz dot export"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "bst", "binary tree", "graphviz", "dot", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
binarysearchtree = "binarysearchtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["binarysearchtree"]

[tool.pytest.ini_options]
addopts = "-ra"
