[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "negi"
version = "0.1.0"
description = "Small utilities: character width lookups, path helpers, a linked list, terminal messages, directory creation and process spawning"
requires-python = ">=3.10"
dependencies = []
keywords = ["path", "terminal", "messages", "mkdir", "subprocess", "unicode", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["negi"]

[tool.pytest.ini_options]
addopts = "-ra"
