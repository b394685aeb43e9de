[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "replicator"
version = "0.1.0"
description = "Core pieces of a small 3D engine: matrix operations, transforms, meshes, materials, lights and a scene tree"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "graphics", "rendering", "mesh", "transform", "matrix", "quaternion", "scene graph"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["replicator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
