[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ytdkit"
version = "1.7.1"
description = "Building blocks for a YouTrack command-line client: open targets, aliases, boards, articles, saved searches and JSON input schemas"
requires-python = ">=3.10"
dependencies = []
keywords = ["youtrack", "issue-tracker", "cli", "tickets", "agile", "json-schema"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ytdkit-schema = "ytdkit.schema:main"

[tool.hatch.build.targets.wheel]
packages = ["ytdkit"]

[tool.hatch.build.targets.sdist]
include = ["ytdkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
