[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "museumdesk"
version = "0.1.0"
description = "Museum front-desk library: exhibits, guides, schedules, tickets, memberships and reviews kept in JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = ["museum", "tickets", "exhibits", "schedule", "membership", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["museumdesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
