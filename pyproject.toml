[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledcube"
version = "0.1.0"
description = "Controller logic for an 8x8x8 RGB LED cube: frame layout, light shows, state tracking and an in-memory board"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "cube", "rgb", "light-show", "shift-register", "demultiplexer"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledcube = "ledcube.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["ledcube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
