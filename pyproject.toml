[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "labtasks"
version = "0.1.0"
description = "Small numeric exercises, number-set classification, a phone-book report and a stack calculator"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "calculator", "primes", "education", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtasks = "labtasks.cli:main"

[tool.setuptools.packages.find]
include = ["labtasks*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
