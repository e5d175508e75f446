[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logsieve"
version = "0.1.0"
description = "Terminal viewer for field-separated log files with level filters, search and clipboard export"
requires-python = ">=3.10"
dependencies = [
    "urwid",
]
keywords = ["log", "viewer", "tui", "terminal", "filter", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
logsieve = "logsieve.app:main"

[tool.hatch.build.targets.wheel]
packages = ["logsieve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
