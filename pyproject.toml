[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anistream"
version = "0.1.0"
description = "Search anime, pick an episode and stream it in mpv from the terminal"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["anime", "streaming", "mpv", "cli", "graphql"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
anistream = "anistream.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["anistream"]

[tool.pytest.ini_options]
addopts = "-ra"
