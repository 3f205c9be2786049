[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dgpkit"
version = "0.1.0"
description = "Tokenizer, bounding-box, rotation and file-format registry utilities for 3D geometry processing"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "tokenizer", "rotation", "bounding-box", "mesh", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dgpkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
