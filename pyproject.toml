[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leveldbpy"
version = "0.1.0"
description = "Building blocks of a LevelDB-style key-value store: codecs, hashing, bloom filters, internal keys, file names and a skip list"
requires-python = ">=3.10"
dependencies = []
keywords = ["leveldb", "key-value", "storage", "bloom-filter", "skiplist"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["leveldbpy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
