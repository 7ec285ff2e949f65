[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yieldkit"
version = "0.1.0"
description = "Generator objects whose producing function hands values out with yield_(), in hand-off and thread-backed variants"
requires-python = ">=3.10"
dependencies = []
keywords = ["generator", "coroutine", "yield", "threads", "iterator", "binary search tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yieldkit-fib = "yieldkit.fib:main"
yieldkit-bst = "yieldkit.bst:main"

[tool.hatch.build.targets.wheel]
packages = ["yieldkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
