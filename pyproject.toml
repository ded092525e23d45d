[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkbench"
version = "0.1.0"
description = "Small classic data structures and text utilities: linked lists, a deque, a priority queue, a binary search tree, prime generators and a line-numbering stream filter."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "deque",
    "priority-queue",
    "binary-search-tree",
    "primes",
    "sieve",
    "text-processing",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsworkbench-streamops = "dsworkbench.streamops:main"
dsworkbench-tree-report = "dsworkbench.tree_report:main"
dsworkbench-primes = "dsworkbench.primes:main"
dsworkbench-cards = "dsworkbench.cards:main"
dsworkbench-reverse = "dsworkbench.template_list:main"

[tool.hatch.build.targets.wheel]
packages = ["dsworkbench"]

[tool.hatch.build.targets.sdist]
include = ["dsworkbench", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
