[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpkg"
version = "0.0.1"
description = "Building blocks for a small package manager: repository index parsing, package metadata, plugins and file-system helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["package-manager", "packages", "repository", "plugins"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fpkg = "fpkg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fpkg"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
