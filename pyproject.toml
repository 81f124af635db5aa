[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordsearch"
version = "0.1.0"
description = "Inverted-index word search over plain-text books, with an interactive terminal prompt."
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "search", "text", "hash table", "books"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
wordsearch = "wordsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordsearch"]

[tool.pytest.ini_options]
addopts = "-ra"
