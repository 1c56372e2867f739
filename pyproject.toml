[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "upodesh"
version = "0.1.0"
description = "Bangla word suggestions for phonetic (Roman-letter) input, driven by a pattern trie and a word list"
requires-python = ">=3.10"
dependencies = []
keywords = ["bangla", "bengali", "phonetic", "transliteration", "suggestions", "trie", "input-method"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Bengali",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
upodesh = "upodesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["upodesh"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
