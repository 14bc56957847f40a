[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfidfsearch"
version = "0.1.0"
description = "Small TF-IDF document index with error-tolerant term counting and cosine-similarity search"
requires-python = ">=3.10"
dependencies = []
keywords = ["tf-idf", "search", "indexing", "kmp", "cosine-similarity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
tfidfsearch = "tfidfsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tfidfsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
