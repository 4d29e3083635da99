[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vcpool"
version = "0.1.0"
description = "A small thread pool with optional task priorities, pausing, stopping and bounded waits."
requires-python = ">=3.10"
dependencies = []
keywords = ["thread pool", "threads", "concurrency", "priority queue", "futures"]
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
vcpool-demo = "vcpool.usecases:main"

[tool.hatch.build.targets.wheel]
packages = ["vcpool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
