[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "itertoolkit"
version = "0.1.0"
description = "Lazy iterator adaptors: chunking, grouping maps, k-way merge, intersperse and k-smallest selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "grouping", "merge", "chunks", "lazy"]
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
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["itertoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
