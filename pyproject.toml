[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxirun"
version = "0.1.0"
description = "An application runner with fuzzy search over desktop entries and a line-based terminal interface."
requires-python = ">=3.11"
dependencies = []
keywords = ["launcher", "runner", "desktop-entry", "fuzzy", "xdg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oxirun = "oxirun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oxirun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
