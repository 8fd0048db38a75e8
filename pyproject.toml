[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autocomplete"
version = "1.0.0"
description = "Frequency-ranked word autocompletion backed by a trie, with prefix, shortest-first, lexicographic and wildcard search"
requires-python = ">=3.10"
dependencies = []
keywords = ["autocomplete", "trie", "prefix search", "wildcard", "word frequency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autocomplete = "autocomplete.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["autocomplete"]

[tool.hatch.build.targets.sdist]
include = ["autocomplete", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
