[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kappa"
version = "0.1.0"
description = "A small terminal text editor with a command palette"
requires-python = ">=3.10"
keywords = ["editor", "terminal", "kappa", "text", "text-editor", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kappa = "kappa.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kappa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
