[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pseudocode"
version = "0.1.0"
description = "Translate exam-style pseudocode into C++ source and build it with g++"
requires-python = ">=3.10"
dependencies = []
keywords = ["pseudocode", "compiler", "transpiler", "c++", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pseudocode = "pseudocode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pseudocode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
