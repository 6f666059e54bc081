[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsmc"
version = "0.1.0"
description = "Monte Carlo particle transport building blocks: random seeds, particle vaults, send queues, population control and run parameters."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "monte carlo",
    "particle transport",
    "population control",
    "russian roulette",
    "random number generator",
    "simulation",
    "physics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qsmc"]

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
