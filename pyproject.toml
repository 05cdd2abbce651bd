[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: binary trees, AVL insertion, heaps, linked lists, Huffman coding, dynamic programming and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-tree",
    "avl",
    "heap",
    "huffman",
    "dynamic-programming",
    "linked-list",
    "dining-philosophers",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodrills-cube-table = "algodrills.cube_table:main"
algodrills-philosophers = "algodrills.philosophers:main"

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
