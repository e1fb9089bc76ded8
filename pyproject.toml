[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jianmu"
version = "0.1.0"
description = "Core data structures of a small typed SSA intermediate representation with an LLVM-style text printer"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ir", "ssa", "intermediate-representation", "llvm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jianmu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
