[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursealgos"
version = "0.1.0"
description = "Classic course algorithms: sorting, stacks, trees, prime factors and CPU scheduling simulations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "scheduling",
    "binary-tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursealgos = "coursealgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursealgos"]

[tool.hatch.build.targets.sdist]
include = ["coursealgos", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["coursealgos"]
