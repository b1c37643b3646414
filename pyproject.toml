[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "componentmgr"
version = "0.1.0"
description = "Manage a local library of frontend components: export, import, list and show how to install their dependencies"
requires-python = ">=3.11"
keywords = ["components", "frontend", "cli", "vue", "react", "library"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "click>=8.1",
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[project.scripts]
componentmgr = "componentmgr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["componentmgr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
