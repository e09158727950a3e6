[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gardensim"
version = "0.1.0"
description = "Turn-based garden simulator driven by a text command prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "garden", "game", "console", "turn-based"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gardensim = "gardensim.interface:main"

[tool.hatch.build.targets.wheel]
packages = ["gardensim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
