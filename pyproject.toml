[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabexport"
version = "0.1.0"
description = "Read spreadsheet configuration tables: type sheets, data headers and typed row values"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "spreadsheet",
    "xlsx",
    "table",
    "configuration",
    "game-config",
    "schema",
]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tabexport"]

[tool.pytest.ini_options]
addopts = "-ra"
