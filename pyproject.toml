[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcutils"
version = "0.1.0"
description = "Checksums, hashing, UTF-8 helpers, printf-style formatting, bzip2 encoder stages and threat-list entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["adler32", "crc32", "fnv1a", "utf8", "printf", "bzip2", "move-to-front", "threat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tcutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
