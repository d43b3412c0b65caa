[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentlab"
version = "0.1.0"
description = "Small console programs for name lists, surveys, speakers, employees, sports and vocabulary tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "console", "sorting", "searching", "records", "quiz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
studentlab-names = "studentlab.namesearch:main"
studentlab-survey = "studentlab.survey:main"
studentlab-wordcount = "studentlab.wordcount:main"
studentlab-textstats = "studentlab.textstats:main"
studentlab-speakers = "studentlab.speakers:main"
studentlab-employees = "studentlab.employees:main"
studentlab-translate = "studentlab.translation:main"
studentlab-convert-testers = "studentlab.testerbinary:convert_main"
studentlab-translate-binary = "studentlab.testerbinary:main"
studentlab-sports = "studentlab.sports_app:main"

[tool.hatch.build.targets.wheel]
packages = ["studentlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
