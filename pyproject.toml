[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata"
version = "0.1.0"
description = "Small programming exercises: number checks, book catalogues, a text matrix, student grades, Conway's Game of Life and a family of speaking felines."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "kata",
    "game-of-life",
    "ini",
    "factory",
    "plugins",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kata-hello = "kata.numbers:hello_main"
kata-odd-even = "kata.numbers:odd_even_main"
kata-armstrong = "kata.numbers:armstrong_main"
kata-show-arguments = "kata.numbers:show_arguments_main"
kata-books = "kata.books:catalog_main"
kata-matrix = "kata.matrix:main"
kata-bookshop = "kata.bookshop:main"
kata-authors = "kata.authors:main"
kata-student = "kata.student:main"
kata-life = "kata.life:main"
kata-felines = "kata.sample:main"
kata-cats = "kata.reader:main"
kata-plugins = "kata.plugins:main"

[tool.hatch.build.targets.wheel]
packages = ["kata"]

[tool.pytest.ini_options]
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
