[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ispdexa"
version = "0.1.0"
description = "Turn distributed-system simulation results into text reports, chart data and circle-packing SVG pictures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simulation",
    "grid computing",
    "distributed systems",
    "circle packing",
    "svg",
    "reports",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ispdexa = "ispdexa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ispdexa"]

[tool.hatch.build.targets.sdist]
include = ["ispdexa", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
