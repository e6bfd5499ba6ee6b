[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caskdb"
version = "0.1.0"
description = "A small log-structured key-value store in the style of Bitcask"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcask", "key-value", "database", "log-structured", "storage"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["caskdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
