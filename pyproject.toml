[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vetero"
version = "0.1.0"
description = "Weather station helpers: unit conversions, derived values and current weather reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "weather-station", "meteorology", "beaufort", "dewpoint", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vetero"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
