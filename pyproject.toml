[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calidadaire"
version = "0.1.0"
description = "Air quality monitoring, 24-hour forecasting, historical analysis and reports for urban zones of Quito"
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "pollution", "PM2.5", "ozone", "forecast", "Quito"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
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

[project.scripts]
calidadaire = "calidadaire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calidadaire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
