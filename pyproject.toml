[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ktikz"
version = "0.13.2"
description = "Core logic of a TikZ picture editor: settings, LaTeX log highlighting, editing helpers and session handling"
requires-python = ">=3.10"
keywords = ["tikz", "pgf", "latex", "editor", "log", "highlighting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: LaTeX",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ktikz = "ktikz.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ktikz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
