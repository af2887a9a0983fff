[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "f1telemetry"
version = "0.1.0"
description = "Decode F1 22 UDP telemetry packets into Python dataclasses and enums"
requires-python = ">=3.10"
dependencies = []
keywords = ["f1", "telemetry", "udp", "racing", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["f1telemetry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
