[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "ventasdb"
version = "0.1.0"
description = "Sales records from a CSV file: statistics, queries and record editing in an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = ["sales", "csv", "statistics", "avl-tree", "hash-table", "reporting"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ventasdb = "ventasdb.cli:main"

[tool.setuptools.packages.find]
include = ["ventasdb*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
