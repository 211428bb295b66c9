[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocky"
version = "0.1.0"
description = "Headless runtime core of a small 2D game engine: logging, frame timing, camera, modules, input dispatch, scenes, audio bookkeeping and layered rendering."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "scene", "input", "rendering", "headless"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blocky"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
