[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engrus"
version = "1.0.0"
description = "An English-Russian dictionary built on self-balancing AVL tree sets and maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "avl", "tree", "sorted", "translation", "english", "russian"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
engrus = "engrus.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["engrus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
