[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hazelette"
version = "0.1.0"
description = "A small event-driven game engine core: typed events, dispatching, logging and a pygame window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "events", "pygame", "window", "event dispatch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hazelette-sandbox = "hazelette.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["hazelette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
