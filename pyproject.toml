[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Small, readable classic data structures: fixed and growable arrays, character buffers, record tables, queues, stacks, linked lists, an LRU list and a binary search tree."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "circular list",
    "queue",
    "stack",
    "lru",
    "binary search tree",
    "array",
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
structkit-char-array = "structkit.char_array:main"
structkit-num-array = "structkit.num_array:main"
structkit-structure = "structkit.structure:main"
structkit-fifo = "structkit.fifo:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["structkit"]
