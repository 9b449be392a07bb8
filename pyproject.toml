[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duelo"
version = "0.1.0"
description = "A small console role-playing duel game with mages, warriors, combat weapons and magic items"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "role-playing", "duel", "mages", "warriors", "weapons", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
duelo-demo = "duelo.demo:main"
duelo-roster = "duelo.roster:main"
duelo-battle = "duelo.battle:main"

[tool.hatch.build.targets.wheel]
packages = ["duelo"]

[tool.pytest.ini_options]
addopts = "-ra"
