[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpdlink"
version = "0.1.0"
description = "A client library for the Music Player Daemon protocol, with typed responses and query building"
requires-python = ">=3.10"
dependencies = []
keywords = ["mpd", "music player daemon", "audio", "client", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mpdlink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
