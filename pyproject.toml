[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "friendsbook"
version = "0.1.0"
description = "An interactive console directory of social-network members, grouped by username initial and kept in order."
requires-python = ">=3.10"
keywords = ["social network", "directory", "profiles", "interactive", "console"]
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
    "Topic :: Communications :: Chat",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
friendsbook = "friendsbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["friendsbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
