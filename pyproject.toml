[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printfmt"
version = "0.1.0"
description = "A small printf-style formatter with binary, ROT13, reversed and escaped string conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "string formatting", "rot13", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
printfmt-demo = "printfmt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["printfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
