[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapesvg"
version = "0.1.0"
description = "Export static, non-interactive SVG documents from immediate-mode GUI paint shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "gui", "shapes", "export", "vector graphics"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shapesvg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
