[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankpuzzles"
version = "0.1.0"
description = "Solutions to classic programming-practice puzzles on arrays, strings, mathematics, simulations and linked lists."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "exercises", "practice", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["rankpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
