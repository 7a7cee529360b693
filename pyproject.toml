[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifesurvey"
version = "0.1.0"
description = "A short step-by-step questionnaire about the periods of life: childhood, school and youth."
requires-python = ">=3.10"
dependencies = []
keywords = ["survey", "questionnaire", "wizard", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifesurvey = "lifesurvey.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lifesurvey"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
