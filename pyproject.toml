[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retrocards"
version = "0.1.0"
description = "A text-mode roguelike card battler and a scripted chat-room intro, played on a 40x25 character screen"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "roguelike",
    "card game",
    "deckbuilder",
    "text mode",
    "retro",
    "petscii",
]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
retrocards = "retrocards.game:main"
retrocards-intro = "retrocards.intro:main"

[tool.hatch.build.targets.wheel]
packages = ["retrocards"]

[tool.hatch.build.targets.sdist]
include = ["retrocards", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
