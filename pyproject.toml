[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic sorting and searching algorithms, recursion exercises, a threaded word sorter and a heartbeat process watchdog"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "searching", "recursion", "watchdog", "heartbeat", "algorithms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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
algokit-watchdog = "algokit.watchdog_process:main"
algokit-wordsort = "algokit.wordsort:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"
