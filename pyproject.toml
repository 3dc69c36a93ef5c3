[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svision"
version = "0.1.0"
description = "Software-rendered widget toolkit core: bitmaps, colours, layouts and button state machines"
requires-python = ">=3.10"
keywords = ["gui", "widgets", "bitmap", "layout", "raster", "drawing"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["svision"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
