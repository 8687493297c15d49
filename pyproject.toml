[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentrecords"
version = "0.1.0"
description = "A console menu for keeping student records and exam scores in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "grades", "records", "education", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentrecords = "studentrecords.app:main"

[tool.hatch.build.targets.wheel]
packages = ["studentrecords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
