[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeserver"
version = "0.1.0"
description = "Grid engine and HTTP response helpers for a multiplayer snake game server"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "server", "multiplayer", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["snakeserver"]

[tool.pytest.ini_options]
addopts = "-ra"
