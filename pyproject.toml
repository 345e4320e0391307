[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolutions"
version = "0.1.0"
description = "Competitive programming solutions with a small modular arithmetic toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "modular-arithmetic", "monotonic-stack"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subarray-sum = "cpsolutions.subarray_sum:main"
string-task = "cpsolutions.string_task:main"
team = "cpsolutions.team:main"
theatre-square = "cpsolutions.theatre_square:main"
long-words = "cpsolutions.long_words:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
