[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftprintf"
version = "0.1.0"
description = "A printf-style formatter with its own rules for flags, widths and precisions"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "string", "conversion", "utf-8"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftprintf-demo = "ftprintf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftprintf"]

[tool.pytest.ini_options]
addopts = "-ra"
