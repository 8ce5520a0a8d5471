[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lshell"
version = "0.1.0"
description = "A small interactive command shell with built-in text, directory and history utilities"
requires-python = ">=3.10"
keywords = ["shell", "command-line", "tree", "word-count", "history", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lshell = "lshell.shell:main"
lshell-custom = "lshell.custom:main"
lshell-tree = "lshell.tree:main"
lshell-history = "lshell.history:main"
lshell-ls = "lshell.listing:main"
lshell-wordcount = "lshell.textcount:main"

[tool.hatch.build.targets.wheel]
packages = ["lshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
