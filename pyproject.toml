[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railbook"
version = "0.1.0"
description = "A console train reservation system with user accounts, train management and seat booking."
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "reservation", "booking", "tickets", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
railbook = "railbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["railbook"]

[tool.pytest.ini_options]
addopts = "-ra"
