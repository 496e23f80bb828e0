[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexuscore"
version = "0.1.0"
description = "Transform hierarchy, 3D math, procedural meshes, material descriptions and a shader bytecode cache for a small game engine core."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "transform", "quaternion", "scene-graph", "mesh", "material", "shader-cache"]
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
packages = ["nexuscore"]

[tool.pytest.ini_options]
addopts = "-ra"
