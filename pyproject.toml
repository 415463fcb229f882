[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blackjackpro"
version = "1.0.0"
description = "Terminal Blackjack against a dealer or among friends, with registered users and a win ranking."
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "cards", "game", "terminal", "ranking"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blackjackpro = "blackjackpro.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blackjackpro"]

[tool.pytest.ini_options]
addopts = "-ra"
