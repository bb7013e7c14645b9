[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdoptions"
version = "0.1.0"
description = "Serialize and deserialize SOME/IP service discovery entry options"
requires-python = ">=3.10"
dependencies = []
keywords = ["some/ip", "service discovery", "automotive", "serialization", "networking"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sdoptions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
